"""Global pytest configuration."""

import os

# Keep real credentials from the developer's shell or .env out of tests
os.environ["OPENAI_API_KEY"] = ""
os.environ["UNSPLASH_ACCESS_KEY"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

"""Streamlit UI for the trip planner - form, progress, tabbed dossier.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json  # noqa: E402
import os  # noqa: E402
import time  # noqa: E402

import streamlit as st  # noqa: E402
import streamlit.components.v1 as components  # noqa: E402

from ui.helpers import (  # noqa: E402
    BUDGET_OPTIONS,
    DURATION_OPTIONS,
    INTERESTS,
    LOADING_STEP_DELAY_S,
    TRAVELER_OPTIONS,
    ItineraryRequestError,
    activity_icon,
    call_itinerary_api,
    day_activities,
    format_plan_text,
    itinerary_days,
    loading_steps,
    maps_embed_url,
    maps_search_url,
    text_items,
    trip_locations,
    web_search_url,
)
from ui.state import COPIED_RESET_S, PlannerState, Tab  # noqa: E402

# Configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

TAB_LABELS = {
    Tab.itinerary.value: "🗓️ Daily Itinerary",
    Tab.intel.value: "🧭 Trip Intel",
    Tab.map.value: "🗺️ Map",
}


@st.fragment(run_every=COPIED_RESET_S / 4)
def copy_controls(planner: PlannerState, plan_text: str) -> None:
    """Copy Plan button; re-run on a timer so the Copied! label clears itself."""
    copied = planner.is_copied(time.time())
    st.button(
        "✅ Copied!" if copied else "📋 Copy Plan",
        key="copy_plan",
        use_container_width=True,
        on_click=lambda: planner.mark_copied(time.time(), plan_text),
    )
    if copied:
        components.html(
            f"<script>navigator.clipboard.writeText({json.dumps(planner.copied_text)});</script>",
            height=0,
        )
        # Clipboard access can be blocked inside the component iframe
        st.code(planner.copied_text, language=None)


# Page config
st.set_page_config(
    page_title="WanderLust AI",
    page_icon="✈️",
    layout="wide",
)

# Initialize session state
if "planner" not in st.session_state:
    st.session_state.planner = PlannerState()

planner: PlannerState = st.session_state.planner
form = planner.form

# Title
st.title("✈️ WanderLust AI")
st.markdown("*Your personalized travel dossier*")
st.divider()

col_left, col_right = st.columns([1, 3])

# =============================================================================
# LEFT COLUMN - TRIP SETTINGS
# =============================================================================
with col_left:
    st.subheader("✨ Trip Settings")

    form.destination = st.text_input(
        "Destination", value=form.destination, placeholder="e.g., Tokyo, Japan"
    )

    start = st.date_input("Start Date", value=None)
    form.start_date = start.isoformat() if start else ""

    col_days, col_budget = st.columns(2)
    with col_days:
        form.days = st.selectbox(
            "Duration",
            options=DURATION_OPTIONS,
            index=DURATION_OPTIONS.index(form.days) if form.days in DURATION_OPTIONS else 2,
            format_func=lambda d: f"{d} Days",
        )
    with col_budget:
        form.budget = st.selectbox(
            "Budget",
            options=BUDGET_OPTIONS,
            index=BUDGET_OPTIONS.index(form.budget) if form.budget in BUDGET_OPTIONS else 1,
        )

    form.travelers = st.selectbox(
        "Travelers",
        options=TRAVELER_OPTIONS,
        index=TRAVELER_OPTIONS.index(form.travelers) if form.travelers in TRAVELER_OPTIONS else 1,
    )

    st.caption("Interests")
    interest_cols = st.columns(2)
    for i, interest in enumerate(INTERESTS):
        with interest_cols[i % 2]:
            checked = st.checkbox(interest, value=interest in form.interests, key=f"i_{interest}")
            if checked != (interest in form.interests):
                form.toggle_interest(interest)

    generate = st.button(
        "Generate Plan →",
        type="primary",
        use_container_width=True,
        disabled=planner.loading,
    )

    if planner.error and not planner.loading:
        st.error(f"⚠️ {planner.error}")

# =============================================================================
# RIGHT COLUMN - PROGRESS OR DOSSIER
# =============================================================================
with col_right:
    if generate and planner.begin_submission():
        progress = st.empty()
        try:
            for step in loading_steps(form.destination, form.start_date or None):
                planner.set_step(step)
                progress.info(f"⏳ **{step}**  \nGathering data from local sources...")
                time.sleep(LOADING_STEP_DELAY_S)

            try:
                itinerary = call_itinerary_api(BACKEND_URL, form.to_payload())
                planner.succeed(itinerary)
            except ItineraryRequestError as e:
                planner.fail(str(e))
        finally:
            # A widget change mid-request stops this run before succeed/fail
            planner.cancel_submission()
        st.rerun()

    elif generate:
        # Rejected by the client-side check, show the message
        st.rerun()

    if planner.itinerary:
        itinerary = planner.itinerary

        # --- HERO ---
        hero = itinerary.get("heroImage")
        if isinstance(hero, str) and hero:
            st.image(hero, use_container_width=True)
        st.caption("✨ YOUR PERSONALIZED JOURNEY")
        st.header(str(itinerary.get("tripTitle") or f"Trip to {form.destination}"))
        if itinerary.get("summary"):
            st.markdown(str(itinerary["summary"]))

        # --- TABS & ACTIONS ---
        col_tabs, col_copy = st.columns([4, 1])
        with col_tabs:
            selected = st.radio(
                "View",
                options=list(TAB_LABELS),
                index=list(TAB_LABELS).index(planner.active_tab.value),
                format_func=TAB_LABELS.get,
                horizontal=True,
                label_visibility="collapsed",
            )
            planner.select_tab(selected)
        with col_copy:
            copy_controls(planner, format_plan_text(itinerary, form.destination))

        st.divider()

        # --- CONTENT AREA ---
        if planner.active_tab == Tab.itinerary:
            days = itinerary_days(itinerary)
            if not days:
                st.info("No itinerary days found.")
            for day in days:
                with st.container(border=True):
                    header = f"**Day {day.get('day', '?')}** · {day.get('theme', '')}"
                    if day.get("date"):
                        header += f"  _({day['date']})_"
                    st.markdown(header)

                    for activity in day_activities(day):
                        name = activity.get("activity", "Activity")
                        icon = activity_icon(activity.get("type"))
                        st.markdown(f"{icon} **{name}** `{activity.get('time', '')}`")
                        if activity.get("description"):
                            st.write(activity["description"])
                        location = activity.get("location")
                        if location:
                            st.caption(f"📍 {location}")
                        search = f"{name} {location or form.destination}"
                        st.markdown(f"[Look it up ↗]({web_search_url(search)})")

        elif planner.active_tab == Tab.intel:
            col_a, col_b = st.columns(2)
            currency = itinerary.get("currency")
            if not isinstance(currency, dict):
                currency = {"tips": currency or ""}
            with col_a:
                with st.container(border=True):
                    st.markdown("#### 🎒 Packing Essentials")
                    for item in text_items(itinerary.get("packingList")):
                        st.markdown(f"- {item}")
                with st.container(border=True):
                    st.markdown("#### ℹ️ Local Tips & Etiquette")
                    for tip in text_items(itinerary.get("localTips")):
                        st.markdown(f"- {tip}")
            with col_b:
                with st.container(border=True):
                    st.markdown("#### 💰 Currency & Money")
                    st.markdown(f"**Currency:** {currency.get('code', '')}")
                    st.caption(f"Rate: {currency.get('rate', '')}")
                    st.write(currency.get("tips", ""))
                with st.container(border=True):
                    st.markdown("#### 🌤️ Expected Weather")
                    st.write(itinerary.get("weather", ""))

        else:
            components.iframe(maps_embed_url(form.destination), height=450)
            locations = trip_locations(itinerary)
            if locations:
                st.markdown("#### Places on this trip")
                for location in locations:
                    query = f"{location}, {form.destination}"
                    st.markdown(f"- [{location}]({maps_search_url(query)})")

        with st.expander("🔧 Raw JSON Response (dev)"):
            st.json(itinerary)

    elif not planner.loading:
        st.info(
            "🧭 **Ready to explore?** Pick a destination and your interests, "
            "then hit **Generate Plan** to build your dossier."
        )

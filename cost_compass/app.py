"""
AI Cost Compass - Main Application
Dashboard of AI cost calculators: robot project, data center and team.

Run with:
    streamlit run cost_compass/app.py
"""

import sys
from pathlib import Path

import streamlit as st

# Root modules (config, pricing_parameters) live one level up
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import PAGE_TITLE, PAGE_ICON, LAYOUT, CALCULATORS, FEATURES, ZIP_FILENAME, ZIP_MIME, get_calculator

# Import utilities
from utils.state_manager import init_session_state, get_state, set_state, get_all_results
from utils.export_engine import create_reports_zip

# Import tabs
from tabs.tab_robot import render_robot_tab
from tabs.tab_factory import render_factory_tab
from tabs.tab_manpower import render_manpower_tab

CALCULATOR_VIEWS = {
    'robot': render_robot_tab,
    'factory': render_factory_tab,
    'manpower': render_manpower_tab,
}

# =============================================================================
# PAGE CONFIG
# =============================================================================
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded"
)

# Initialize session state
init_session_state()


def open_calculator(calc_id):
    set_state('active_calculator', calc_id)


def render_dashboard():
    """Landing view: one card per calculator plus the feature list."""
    st.title(f"{PAGE_ICON} {PAGE_TITLE}")
    st.markdown("Comprehensive cost analysis for AI projects, infrastructure, and teams")

    st.markdown("---")

    cols = st.columns(len(CALCULATORS))
    for col, calc in zip(cols, CALCULATORS):
        with col:
            with st.container(border=True):
                st.markdown(f"### {calc['icon']} {calc['title']}")
                st.write(calc['description'])
                st.button(
                    "Open Calculator",
                    key=f"open_{calc['id']}",
                    type="primary",
                    on_click=open_calculator,
                    args=(calc['id'],),
                    use_container_width=True
                )

    st.markdown("---")
    st.subheader("Why AI Cost Compass?")
    feature_cols = st.columns(len(FEATURES))
    for col, (title, desc) in zip(feature_cols, FEATURES):
        with col:
            st.markdown(f"**{title}**")
            st.caption(desc)


def render_calculator(calc_id):
    """Calculator view with a way back to the dashboard."""
    calc = get_calculator(calc_id)

    st.button("← Back to Dashboard", key='back_to_dashboard', on_click=open_calculator, args=(None,))

    st.title(f"{calc['icon']} {calc['title']}")
    st.markdown(calc['description'])
    st.markdown("---")

    CALCULATOR_VIEWS[calc_id]()


# =============================================================================
# SIDEBAR - Navigation and Export
# =============================================================================
with st.sidebar:
    st.title(f"{PAGE_ICON} {PAGE_TITLE}")

    st.button("🏠 Dashboard", key='nav_dashboard', on_click=open_calculator, args=(None,), use_container_width=True)
    for calc in CALCULATORS:
        st.button(
            f"{calc['icon']} {calc['title']}",
            key=f"nav_{calc['id']}",
            on_click=open_calculator,
            args=(calc['id'],),
            use_container_width=True
        )

    st.markdown("---")

    # Export Button
    st.subheader("📤 Export Reports")
    results = get_all_results()
    if results:
        st.download_button(
            label="💾 Download All Reports",
            data=create_reports_zip(results),
            file_name=ZIP_FILENAME,
            mime=ZIP_MIME,
            use_container_width=True
        )
        st.caption(f"{len(results)} calculator(s) included")
    else:
        st.caption("Run a calculator to enable report export")

# =============================================================================
# MAIN CONTENT
# =============================================================================
active = get_state('active_calculator')
if active in CALCULATOR_VIEWS:
    render_calculator(active)
else:
    render_dashboard()

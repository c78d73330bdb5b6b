"""
AI Cost Compass - Manpower Tab
Team composition grid by role, region and employment type.
Visualization: Monthly Cost by Role.
Uses session state caching so grid edits survive reruns.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from st_aggrid import AgGrid, GridOptionsBuilder, GridUpdateMode, DataReturnMode

from pricing_parameters import MANPOWER
from utils.state_manager import get_config, set_state, store_result, get_result, reset_calculator
from utils.input_parser import build_manpower_config
from utils.manpower_costs import compute_manpower_cost
from utils.export_engine import format_currency, manpower_rows, breakdown_to_dataframe
from tabs.tab_common import show_corrections, render_export_buttons

ROLE_KEYS = {name: key for key, name in MANPOWER['ROLES']}


def init_manpower_state():
    """Seed the team grid from the current configuration."""
    if 'manpower_form_team_df' not in st.session_state:
        headcount = get_config('manpower')['headcount']
        data = [{'Role': name, 'Headcount': headcount.get(key, 0)} for key, name in MANPOWER['ROLES']]
        st.session_state.manpower_form_team_df = pd.DataFrame(data)


def render_team_grid() -> dict:
    """Editable headcount grid. Returns raw headcount values keyed by role."""
    st.markdown("**Team Composition:**")
    st.caption("Edit Headcount per role. Roles with zero headcount are left out of the breakdown.")

    gb = GridOptionsBuilder.from_dataframe(st.session_state.manpower_form_team_df)
    # Every role row must stay in the grid
    gb.configure_default_column(filterable=False, sortable=False)
    gb.configure_column('Role', editable=False, pinned='left')
    gb.configure_column('Headcount', editable=True, type=['numericColumn'])
    gb.configure_grid_options(stopEditingWhenCellsLoseFocus=True)
    grid_options = gb.build()

    grid_response = AgGrid(
        st.session_state.manpower_form_team_df,
        gridOptions=grid_options,
        update_mode=GridUpdateMode.MODEL_CHANGED,
        data_return_mode=DataReturnMode.AS_INPUT,
        fit_columns_on_grid_load=True,
        height=230,
        key='manpower_team_grid'
    )

    if grid_response.data is not None:
        returned = pd.DataFrame(grid_response.data)
        if set(ROLE_KEYS) <= set(returned.get('Role', [])):
            st.session_state.manpower_form_team_df = returned[['Role', 'Headcount']]

    # Grid cells come back as typed text; the parser coerces them
    return {
        ROLE_KEYS[row['Role']]: row['Headcount']
        for _, row in st.session_state.manpower_form_team_df.iterrows()
        if row['Role'] in ROLE_KEYS
    }


def render_manpower_form() -> dict:
    """Render the input form and return the raw widget values."""
    init_manpower_state()
    config = get_config('manpower')

    st.subheader("👥 Team Configuration")

    project_types = list(MANPOWER['PROJECT_TYPES'])
    project_type = st.selectbox(
        "Project Type",
        options=project_types,
        index=project_types.index(config['project_type']),
        format_func=lambda k: MANPOWER['PROJECT_TYPES'][k],
        key='manpower_form_project_type'
    )

    col1, col2 = st.columns(2)
    with col1:
        region = st.selectbox(
            "Region",
            options=MANPOWER['REGIONS'],
            index=MANPOWER['REGIONS'].index(config['region']),
            format_func=lambda k: MANPOWER['REGION_LABELS'][k],
            key='manpower_form_region'
        )
    with col2:
        employment_type = st.selectbox(
            "Employment Type",
            options=MANPOWER['EMPLOYMENT_TYPES'],
            index=MANPOWER['EMPLOYMENT_TYPES'].index(config['employment_type']),
            format_func=lambda k: MANPOWER['EMPLOYMENT_LABELS'][k],
            key='manpower_form_employment_type'
        )

    project_duration = st.number_input(
        "Project Duration (months)", min_value=0, value=int(config['project_duration']), step=1,
        key='manpower_form_project_duration'
    )

    headcount = render_team_grid()

    remote_work = st.checkbox(
        "Remote/Hybrid Work (15% discount)", value=bool(config['remote_work']),
        key='manpower_form_remote_work'
    )

    return {
        'project_type': project_type,
        'region': region,
        'employment_type': employment_type,
        'project_duration': project_duration,
        'headcount': headcount,
        'remote_work': remote_work,
    }


def render_manpower_results(snapshot: dict):
    """Render metrics, role table and chart for a calculated snapshot."""
    config = snapshot['config']
    result = snapshot['result']

    st.subheader("📊 Cost Analysis Results")

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Team Size", f"{result['team_size']} people")
    with col2:
        st.metric("Monthly Cost", format_currency(result['monthly']))

    st.markdown("---")
    st.markdown("**Team Breakdown:**")
    if result['roles']:
        roles_df = pd.DataFrame([
            {
                'Role': role['name'],
                'Count': f"{role['count']}x",
                'Unit Cost / Month': format_currency(role['unit_cost']),
                'Total / Month': format_currency(role['total_cost']),
            }
            for role in result['roles'].values()
        ])
        st.dataframe(roles_df, hide_index=True, use_container_width=True)
        if config['remote_work']:
            st.caption("Unit costs are before the remote discount; totals include it.")
    else:
        st.info("No roles staffed")

    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        avg = result['avg_cost_per_person']
        st.metric("Avg. Cost per Person", f"{format_currency(avg)}/month" if avg is not None else "N/A")
    with col2:
        st.metric("Project Duration", f"{config['project_duration']} months")

    st.markdown("---")
    st.metric("Total Project Cost", format_currency(result['total']))

    with st.expander("📋 Full Breakdown", expanded=False):
        st.dataframe(breakdown_to_dataframe(manpower_rows(result)), hide_index=True, use_container_width=True)

    if result['roles']:
        roles = list(result['roles'].values())
        fig = go.Figure()
        fig.add_trace(go.Bar(
            x=[r['name'] for r in roles],
            y=[r['total_cost'] for r in roles],
            marker_color='darkorange'
        ))
        fig.update_layout(title='Monthly Cost by Role', height=350, yaxis_title='$/month')
        st.plotly_chart(fig, use_container_width=True)

    render_export_buttons('manpower', "AI Manpower Cost Analysis", snapshot)


def render_manpower_tab():
    """Render the AI Manpower calculator."""
    col_form, col_results = st.columns(2)

    with col_form:
        raw = render_manpower_form()

        config, corrected = build_manpower_config(raw)
        set_state('manpower_config', config)

        if st.button("Calculate Team Cost", type="primary", key='manpower_calculate', use_container_width=True):
            show_corrections(corrected)
            store_result('manpower', config, compute_manpower_cost(config))

        st.button("Reset to Defaults", key='manpower_reset', on_click=reset_calculator, args=('manpower',), use_container_width=True)

    with col_results:
        snapshot = get_result('manpower')
        if snapshot:
            render_manpower_results(snapshot)
        else:
            st.info("💡 Set up your team and press Calculate to see the cost breakdown")

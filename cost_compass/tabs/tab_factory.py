"""
AI Cost Compass - Factory Tab
Data center configuration form and CAPEX / OPEX / TCO results.
Visualization: CAPEX composition pie.
"""

import streamlit as st
import pandas as pd
import plotly.express as px

from pricing_parameters import FACTORY
from utils.state_manager import get_config, set_state, store_result, get_result, reset_calculator
from utils.input_parser import build_factory_config
from utils.factory_costs import compute_factory_cost
from utils.export_engine import format_currency, format_number, format_power, factory_rows, breakdown_to_dataframe
from tabs.tab_common import show_corrections, render_export_buttons


def render_factory_form() -> dict:
    """Render the input form and return the raw widget values."""
    config = get_config('factory')

    st.subheader("🏭 Data Center Configuration")

    col1, col2 = st.columns(2)
    with col1:
        facility_size = st.number_input("Facility Size (sq ft)", min_value=0, value=int(config['facility_size']), step=1000, key='factory_form_facility_size')
    with col2:
        rack_count = st.number_input("Number of Racks", min_value=0, value=int(config['rack_count']), step=10, key='factory_form_rack_count')

    gpu_type = st.selectbox(
        "GPU Type",
        options=FACTORY['GPU_TYPES'],
        index=FACTORY['GPU_TYPES'].index(config['gpu_type']),
        format_func=lambda k: FACTORY['GPU_LABELS'][k],
        key='factory_form_gpu_type'
    )
    gpu_per_rack = st.number_input("GPUs per Rack", min_value=0, value=int(config['gpu_per_rack']), step=1, key='factory_form_gpu_per_rack')

    region = st.selectbox(
        "Region",
        options=FACTORY['REGIONS'],
        index=FACTORY['REGIONS'].index(config['region']),
        format_func=lambda k: FACTORY['REGION_LABELS'][k],
        key='factory_form_region'
    )

    col1, col2 = st.columns(2)
    with col1:
        power_cost = st.number_input("Power Cost ($/kWh)", min_value=0.0, value=float(config['power_cost_per_kwh']), step=0.01, key='factory_form_power_cost')
    with col2:
        pue = st.number_input("PUE Ratio", min_value=0.0, value=float(config['pue']), step=0.01, key='factory_form_pue')

    staff_count = st.number_input("Staff Count", min_value=0, value=int(config['staff_count']), step=1, key='factory_form_staff_count')

    return {
        'facility_size': facility_size,
        'rack_count': rack_count,
        'gpu_type': gpu_type,
        'gpu_per_rack': gpu_per_rack,
        'power_cost_per_kwh': power_cost,
        'pue': pue,
        'staff_count': staff_count,
        'region': region,
    }


def render_factory_results(snapshot: dict):
    """Render metrics, tables and chart for a calculated snapshot."""
    result = snapshot['result']
    infra = result['infrastructure']
    compute = result['compute']
    operating = result['operating']
    totals = result['totals']

    st.subheader("📊 Cost Analysis Results")

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Total GPUs", format_number(compute['gpu_count']))
    with col2:
        st.metric("Power Draw", f"{format_power(compute['total_power_with_pue'])} kW")
    st.caption(f"IT load {format_power(compute['total_power_kw'])} kW before PUE")

    st.markdown("---")
    st.markdown("**Capital Expenditure (CAPEX):**")
    capex_df = pd.DataFrame([
        {'Item': 'Building', 'Amount': format_currency(result['building'])},
        {'Item': 'Infrastructure', 'Amount': format_currency(infra['total'])},
        {'Item': 'GPU Hardware', 'Amount': format_currency(compute['gpu_cost'])},
        {'Item': 'Total CAPEX', 'Amount': format_currency(totals['capex'])},
    ])
    st.dataframe(capex_df, hide_index=True, use_container_width=True)

    st.markdown("**Operating Expenditure (Annual):**")
    opex_df = pd.DataFrame([
        {'Item': 'Electricity', 'Amount': format_currency(operating['annual_power'])},
        {'Item': 'Staffing', 'Amount': format_currency(operating['annual_staff'])},
        {'Item': 'Total Annual OPEX', 'Amount': format_currency(operating['total'])},
    ])
    st.dataframe(opex_df, hide_index=True, use_container_width=True)

    st.markdown("---")
    st.metric("5-Year Total Cost of Ownership", format_currency(totals['five_year_tco']))

    with st.expander("📋 Full Breakdown", expanded=False):
        st.dataframe(breakdown_to_dataframe(factory_rows(result)), hide_index=True, use_container_width=True)

    # CAPEX composition
    pie_data = pd.DataFrame({
        'Category': ['Building', 'Racks', 'Networking', 'Cooling', 'Backup Power', 'GPU Hardware'],
        'Amount': [result['building'], infra['racks'], infra['networking'],
                   infra['cooling'], infra['backup'], compute['gpu_cost']]
    })
    if pie_data['Amount'].sum() > 0:
        fig = px.pie(pie_data, values='Amount', names='Category', title='CAPEX Breakdown')
        fig.update_layout(height=350)
        st.plotly_chart(fig, use_container_width=True)

    render_export_buttons('factory', "AI Data Center Cost Analysis", snapshot)


def render_factory_tab():
    """Render the AI Factory calculator."""
    col_form, col_results = st.columns(2)

    with col_form:
        raw = render_factory_form()
        config, corrected = build_factory_config(raw)
        set_state('factory_config', config)

        if st.button("Calculate Total Cost", type="primary", key='factory_calculate', use_container_width=True):
            show_corrections(corrected)
            store_result('factory', config, compute_factory_cost(config))

        st.button("Reset to Defaults", key='factory_reset', on_click=reset_calculator, args=('factory',), use_container_width=True)

    with col_results:
        snapshot = get_result('factory')
        if snapshot:
            render_factory_results(snapshot)
        else:
            st.info("💡 Adjust the configuration and press Calculate to see the cost breakdown")

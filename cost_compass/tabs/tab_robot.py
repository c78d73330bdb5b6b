"""
AI Cost Compass - Robot Tab
Robot project inputs: team, Jetson module, sensors, training and prototypes.
Visualization: Project cost by category.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from pricing_parameters import ROBOT
from utils.state_manager import get_config, set_state, store_result, get_result, reset_calculator
from utils.input_parser import build_robot_config
from utils.robot_costs import compute_robot_cost
from utils.export_engine import format_currency, robot_rows, breakdown_to_dataframe
from tabs.tab_common import show_corrections, render_export_buttons


def render_robot_form() -> dict:
    """Render the input form and return the raw widget values."""
    config = get_config('robot')

    st.subheader("🤖 Robot Configuration")

    team_size = st.number_input("Development Team Size", min_value=0, value=int(config['team_size']), step=1, key='robot_form_team_size')

    compute_module = st.selectbox(
        "NVIDIA Jetson Module",
        options=ROBOT['COMPUTE_MODULES'],
        index=ROBOT['COMPUTE_MODULES'].index(config['compute_module']),
        format_func=lambda k: ROBOT['MODULE_LABELS'][k],
        key='robot_form_compute_module'
    )
    lidar_type = st.selectbox(
        "LiDAR Sensor",
        options=ROBOT['LIDAR_TYPES'],
        index=ROBOT['LIDAR_TYPES'].index(config['lidar_type']),
        format_func=lambda k: ROBOT['LIDAR_LABELS'][k],
        key='robot_form_lidar_type'
    )

    col1, col2 = st.columns(2)
    with col1:
        camera_count = st.number_input("RGB-D Cameras", min_value=0, value=int(config['camera_count']), step=1, key='robot_form_camera_count')
    with col2:
        actuator_count = st.number_input("Servo Actuators", min_value=0, value=int(config['actuator_count']), step=1, key='robot_form_actuator_count')

    col1, col2 = st.columns(2)
    with col1:
        training_hours = st.number_input("Training Hours (Cloud GPU)", min_value=0, value=int(config['training_hours']), step=10, key='robot_form_training_hours')
    with col2:
        prototypes = st.number_input("3D Printed Prototypes", min_value=0, value=int(config['prototypes']), step=1, key='robot_form_prototypes')

    cloud_region = st.selectbox(
        "Cloud Region",
        options=ROBOT['CLOUD_REGIONS'],
        index=ROBOT['CLOUD_REGIONS'].index(config['cloud_region']),
        format_func=lambda k: ROBOT['CLOUD_REGION_LABELS'][k],
        key='robot_form_cloud_region'
    )
    power_cost = st.number_input("Power Cost ($/kWh)", min_value=0.0, value=float(config['power_cost']), step=0.01, key='robot_form_power_cost')

    return {
        'team_size': team_size,
        'compute_module': compute_module,
        'lidar_type': lidar_type,
        'camera_count': camera_count,
        'actuator_count': actuator_count,
        'training_hours': training_hours,
        'prototypes': prototypes,
        'cloud_region': cloud_region,
        'power_cost': power_cost,
    }


def render_robot_results(snapshot: dict):
    """Render metrics, tables and chart for a calculated snapshot."""
    result = snapshot['result']
    hardware = result['hardware']

    st.subheader("📊 Cost Analysis Results")

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Licensing Cost", format_currency(result['licensing']))
    with col2:
        st.metric("Hardware Cost", format_currency(hardware['total']))

    st.markdown("---")
    st.markdown("**Hardware Breakdown:**")
    hardware_df = pd.DataFrame([
        {'Component': 'Jetson Module', 'Amount': format_currency(hardware['compute_module'])},
        {'Component': 'LiDAR Sensor', 'Amount': format_currency(hardware['lidar'])},
        {'Component': 'Cameras', 'Amount': format_currency(hardware['cameras'])},
        {'Component': 'Actuators', 'Amount': format_currency(hardware['actuators'])},
        {'Component': 'Microcontroller', 'Amount': format_currency(hardware['microcontroller'])},
    ])
    st.dataframe(hardware_df, hide_index=True, use_container_width=True)

    st.markdown("**Other Costs:**")
    other_df = pd.DataFrame([
        {'Item': 'Training (AWS)', 'Amount': format_currency(result['training'])},
        {'Item': 'Prototyping', 'Amount': format_currency(result['prototyping'])},
        {'Item': 'Chassis', 'Amount': format_currency(result['chassis'])},
        {'Item': 'Annual Power', 'Amount': format_currency(result['annual_power'])},
    ])
    st.dataframe(other_df, hide_index=True, use_container_width=True)

    st.markdown("---")
    st.metric("Total Project Cost", format_currency(result['total']))

    with st.expander("📋 Full Breakdown", expanded=False):
        st.dataframe(breakdown_to_dataframe(robot_rows(result)), hide_index=True, use_container_width=True)

    categories = ['Licensing', 'Hardware', 'Training', 'Prototyping', 'Chassis', 'Power']
    amounts = [result['licensing'], hardware['total'], result['training'],
               result['prototyping'], result['chassis'], result['annual_power']]
    fig = go.Figure()
    fig.add_trace(go.Bar(x=categories, y=amounts, marker_color='steelblue'))
    fig.update_layout(title='Project Cost by Category', height=350, yaxis_title='$')
    st.plotly_chart(fig, use_container_width=True)

    render_export_buttons('robot', "AI Robot Cost Analysis", snapshot)


def render_robot_tab():
    """Render the AI Robot calculator."""
    col_form, col_results = st.columns(2)

    with col_form:
        raw = render_robot_form()
        config, corrected = build_robot_config(raw)
        set_state('robot_config', config)

        if st.button("Calculate Total Cost", type="primary", key='robot_calculate', use_container_width=True):
            show_corrections(corrected)
            store_result('robot', config, compute_robot_cost(config))

        st.button("Reset to Defaults", key='robot_reset', on_click=reset_calculator, args=('robot',), use_container_width=True)

    with col_results:
        snapshot = get_result('robot')
        if snapshot:
            render_robot_results(snapshot)
        else:
            st.info("💡 Adjust the configuration and press Calculate to see the cost breakdown")

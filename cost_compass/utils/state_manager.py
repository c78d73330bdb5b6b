"""
AI Cost Compass - State Manager
Keeps the active view, each calculator's form values and its last result in session state.
"""

import copy
import streamlit as st
from typing import Any, Optional

from pricing_parameters import FACTORY, MANPOWER, ROBOT, COMMON

DEFAULT_CONFIGS = {
    'factory': FACTORY['DEFAULTS'],
    'manpower': MANPOWER['DEFAULTS'],
    'robot': ROBOT['DEFAULTS'],
}


def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        # Dashboard (None) or a calculator id
        'active_calculator': None,
    }
    for calc_id in COMMON['CALCULATOR_IDS']:
        # Live form values
        defaults[f'{calc_id}_config'] = copy.deepcopy(DEFAULT_CONFIGS[calc_id])
        # Snapshot taken on Calculate: {'config': ..., 'result': ...}
        defaults[f'{calc_id}_result'] = None

    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def get_state(key: str, default: Any = None) -> Any:
    """Get a value from session state."""
    return st.session_state.get(key, default)


def set_state(key: str, value: Any):
    """Set a value in session state."""
    st.session_state[key] = value


def get_config(calc_id: str) -> dict:
    """Copy of the current form values, safe to hand to a cost engine."""
    return copy.deepcopy(get_state(f'{calc_id}_config', DEFAULT_CONFIGS[calc_id]))


def store_result(calc_id: str, config: dict, result: dict):
    """Remember the breakdown together with the configuration that produced it."""
    set_state(f'{calc_id}_config', copy.deepcopy(config))
    set_state(f'{calc_id}_result', {'config': copy.deepcopy(config), 'result': result})


def get_result(calc_id: str) -> Optional[dict]:
    """Last snapshot for a calculator, or None before the first calculation."""
    return get_state(f'{calc_id}_result')


def reset_calculator(calc_id: str):
    """Restore default form values and drop the last result."""
    # Form widgets are keyed '<calc_id>_form_<field>'
    for key in list(st.session_state.keys()):
        if key.startswith(f'{calc_id}_form_'):
            del st.session_state[key]

    set_state(f'{calc_id}_config', copy.deepcopy(DEFAULT_CONFIGS[calc_id]))
    set_state(f'{calc_id}_result', None)


def get_all_results() -> dict:
    """Snapshots of every calculator that has been calculated."""
    results = {}
    for calc_id in COMMON['CALCULATOR_IDS']:
        snapshot = get_result(calc_id)
        if snapshot is not None:
            results[calc_id] = snapshot
    return results

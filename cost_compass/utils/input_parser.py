"""
AI Cost Compass - Input Parser
Turns raw form values into calculator configurations.

Malformed numbers fall back to a per-field default, numbers are clamped to
[0, LIMITS] and categorical choices are restricted to their table keys, so
the cost engines only ever receive well-typed, bounded input.
"""

import copy
import math
import pandas as pd
from typing import Dict, Any, List, Tuple

from pricing_parameters import FACTORY, MANPOWER, ROBOT

TRUE_STRINGS = {'true', 'yes', 'y', '1', 'on'}
FALSE_STRINGS = {'false', 'no', 'n', '0', 'off', ''}


def parse_numeric(value, default: float = 0.0) -> float:
    """Parse formatted number strings, returning default when unparseable."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else default
    if pd.isna(value):
        return default
    cleaned = str(value).replace('$', '').replace(',', '').replace('%', '').replace(' ', '').strip()
    if cleaned.startswith('(') and cleaned.endswith(')'):
        cleaned = '-' + cleaned[1:-1]
    try:
        parsed = float(cleaned)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


def coerce_int(value, default: int = 0) -> int:
    """Parse an integer form field; fractional input is truncated toward zero."""
    parsed = parse_numeric(value, default=None)
    if parsed is None:
        return default
    return int(parsed)


def coerce_float(value, default: float = 0.0) -> float:
    """Parse a decimal form field."""
    parsed = parse_numeric(value, default=None)
    if parsed is None:
        return default
    return parsed


def coerce_choice(value, choices, default):
    """Restrict a categorical value to its allowed keys."""
    if value in choices:
        return value
    return default


def coerce_bool(value, default: bool = False) -> bool:
    """Parse checkbox-like values."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and not pd.isna(value):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return default


def _is_valid_number(value) -> bool:
    return parse_numeric(value, default=None) is not None


def _clamp(field: str, value, limit, corrected: List[str]):
    """Keep a parsed value within [0, limit], recording the field when it moves."""
    bounded = min(max(value, 0), limit)
    if bounded != value:
        corrected.append(field)
    return type(value)(bounded)


def _merge_numeric(raw: Dict[str, Any], config: Dict[str, Any], fields: Dict[str, type],
                   params: Dict[str, Any], corrected: List[str]):
    """Copy numeric fields from raw into config, recording fields that needed a fallback or clamp."""
    for field, kind in fields.items():
        if field not in raw:
            continue
        value = raw[field]
        if not _is_valid_number(value):
            corrected.append(field)
        if kind is int:
            parsed = coerce_int(value, params['FALLBACKS'][field])
        else:
            parsed = coerce_float(value, params['FALLBACKS'][field])
        config[field] = _clamp(field, parsed, params['LIMITS'][field], corrected)


def _merge_choice(raw: Dict[str, Any], config: Dict[str, Any], field: str, choices,
                  corrected: List[str]):
    if field not in raw:
        return
    value = raw[field]
    if value not in choices:
        corrected.append(field)
    config[field] = coerce_choice(value, choices, config[field])


# =============================================================================
# CONFIG BUILDERS
# =============================================================================

FACTORY_NUMERIC_FIELDS = {
    'facility_size': int,
    'rack_count': int,
    'gpu_per_rack': int,
    'power_cost_per_kwh': float,
    'pue': float,
    'staff_count': int,
}

ROBOT_NUMERIC_FIELDS = {
    'team_size': int,
    'camera_count': int,
    'actuator_count': int,
    'training_hours': int,
    'prototypes': int,
    'power_cost': float,
}


def build_factory_config(raw: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Build a factory configuration from raw form values.

    Returns (config, corrected) where corrected lists the fields that were
    replaced by a fallback value or clamped to the LIMITS range.
    """
    config = dict(FACTORY['DEFAULTS'])
    corrected = []

    _merge_numeric(raw, config, FACTORY_NUMERIC_FIELDS, FACTORY, corrected)
    _merge_choice(raw, config, 'gpu_type', FACTORY['GPU_TYPES'], corrected)
    _merge_choice(raw, config, 'region', FACTORY['REGIONS'], corrected)

    return config, corrected


def build_manpower_config(raw: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Build a manpower configuration from raw form values.

    Headcounts are read from raw['headcount'] keyed by role; a role missing
    from it counts as zero. A malformed or out-of-range headcount is
    reported as 'headcount.<role>'.
    """
    config = copy.deepcopy(MANPOWER['DEFAULTS'])
    corrected = []

    _merge_choice(raw, config, 'project_type', MANPOWER['PROJECT_TYPES'], corrected)
    _merge_choice(raw, config, 'region', MANPOWER['REGIONS'], corrected)
    _merge_choice(raw, config, 'employment_type', MANPOWER['EMPLOYMENT_TYPES'], corrected)

    if 'project_duration' in raw:
        value = raw['project_duration']
        if not _is_valid_number(value):
            corrected.append('project_duration')
        duration = coerce_int(value, MANPOWER['FALLBACKS']['project_duration'])
        config['project_duration'] = _clamp('project_duration', duration, MANPOWER['LIMITS']['project_duration'], corrected)

    if 'headcount' in raw:
        raw_headcount = raw['headcount'] or {}
        # A submitted team replaces the default one; unlisted roles are unstaffed
        for role, _ in MANPOWER['ROLES']:
            field = f'headcount.{role}'
            value = raw_headcount.get(role, 0)
            if not _is_valid_number(value):
                corrected.append(field)
            count = coerce_int(value, MANPOWER['FALLBACKS']['headcount'])
            config['headcount'][role] = _clamp(field, count, MANPOWER['LIMITS']['headcount'], corrected)

    if 'remote_work' in raw:
        config['remote_work'] = coerce_bool(raw['remote_work'], default=False)

    return config, corrected


def build_robot_config(raw: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """Build a robot configuration from raw form values."""
    config = dict(ROBOT['DEFAULTS'])
    corrected = []

    _merge_numeric(raw, config, ROBOT_NUMERIC_FIELDS, ROBOT, corrected)
    _merge_choice(raw, config, 'compute_module', ROBOT['COMPUTE_MODULES'], corrected)
    _merge_choice(raw, config, 'lidar_type', ROBOT['LIDAR_TYPES'], corrected)
    _merge_choice(raw, config, 'cloud_region', ROBOT['CLOUD_REGIONS'], corrected)

    return config, corrected

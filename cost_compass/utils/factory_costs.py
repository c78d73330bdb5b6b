"""
AI Cost Compass - Factory Cost Engine
Estimates build and running cost of an AI data center (GPU cluster).

Output sections:
    building        - construction cost
    infrastructure  - racks, networking, cooling, backup power
    compute         - GPU count and cost, raw and PUE-adjusted power draw
    operating       - annual electricity and staffing
    totals          - CAPEX, annual OPEX, 5-year TCO
"""

import math
from typing import Dict, Any

from pricing_parameters import FACTORY, COMMON


def compute_factory_cost(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Calculate the full data center cost breakdown.

    Args:
        config: Factory configuration (see FACTORY['DEFAULTS'] for keys).
                gpu_type and region must be valid table keys; an unknown
                value raises KeyError.

    Returns a new breakdown dict; the config is not modified.
    """
    region = config['region']
    gpu_type = config['gpu_type']
    rack_count = config['rack_count']

    building_cost = config['facility_size'] * FACTORY['CONSTRUCTION_COST_PER_SQFT'][region]

    rack_cost = rack_count * FACTORY['RACK_COST']
    networking_cost = rack_count * FACTORY['NETWORKING_COST_PER_RACK']

    gpu_count = rack_count * config['gpu_per_rack']
    gpu_cost = gpu_count * FACTORY['GPU_PRICES'][gpu_type]

    # Power (kW)
    gpu_watts = gpu_count * FACTORY['GPU_POWER_WATTS'][gpu_type]
    total_power_kw = (gpu_watts + rack_count * FACTORY['RACK_OVERHEAD_WATTS']) / 1000
    total_power_with_pue = total_power_kw * config['pue']
    hours_per_year = COMMON['HOURS_PER_DAY'] * COMMON['DAYS_PER_YEAR']
    annual_power_cost = total_power_with_pue * hours_per_year * config['power_cost_per_kwh']

    # Sized on IT load, not PUE-adjusted load
    cooling_cost = math.ceil(total_power_kw / FACTORY['COOLING_BLOCK_KW']) * FACTORY['COOLING_BLOCK_COST']
    backup_power_cost = math.ceil(total_power_kw / FACTORY['BACKUP_BLOCK_KW']) * FACTORY['BACKUP_BLOCK_COST']

    annual_staff_cost = config['staff_count'] * FACTORY['STAFF_SALARY'][region]

    total_capex = (building_cost + rack_cost + networking_cost + gpu_cost
                   + cooling_cost + backup_power_cost)
    total_opex_annual = annual_power_cost + annual_staff_cost
    five_year_tco = total_capex + total_opex_annual * FACTORY['TCO_YEARS']

    return {
        'building': building_cost,
        'infrastructure': {
            'racks': rack_cost,
            'networking': networking_cost,
            'cooling': cooling_cost,
            'backup': backup_power_cost,
            'total': rack_cost + networking_cost + cooling_cost + backup_power_cost,
        },
        'compute': {
            'gpu_count': gpu_count,
            'gpu_cost': gpu_cost,
            'total_power_kw': total_power_kw,
            'total_power_with_pue': total_power_with_pue,
        },
        'operating': {
            'annual_power': annual_power_cost,
            'annual_staff': annual_staff_cost,
            'total': total_opex_annual,
        },
        'totals': {
            'capex': total_capex,
            'opex_annual': total_opex_annual,
            'five_year_tco': five_year_tco,
        },
    }

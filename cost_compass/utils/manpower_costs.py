"""
AI Cost Compass - Manpower Cost Engine
Monthly and total project cost of an AI team by region and employment type.
"""

from typing import Dict, Any, Optional

from pricing_parameters import MANPOWER, COMMON


def unit_monthly_cost(region: str, role: str, employment_type: str) -> float:
    """Monthly cost of one person in a role, before any remote discount."""
    rates = MANPOWER['SALARIES'][region][role]
    if employment_type == 'freelance':
        # Scaled to a 160-hour month so the "/month" report label holds;
        # the raw hourly rate is never reported as a unit cost
        return rates['freelance'] * MANPOWER['WORK_HOURS_PER_MONTH']
    return rates['fulltime'] / COMMON['MONTHS_PER_YEAR']


def average_cost_per_person(monthly: float, team_size: int) -> Optional[float]:
    """Monthly cost per head, or None for an empty team."""
    if team_size == 0:
        return None
    return monthly / team_size


def compute_manpower_cost(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Calculate team cost breakdown.

    Only roles with a positive headcount appear under 'roles'. Each entry
    carries the pre-discount unit_cost next to the post-discount total_cost.
    avg_cost_per_person is None when the team is empty.
    """
    region = config['region']
    employment_type = config['employment_type']
    headcount = config['headcount']
    remote_multiplier = MANPOWER['REMOTE_MULTIPLIER'] if config['remote_work'] else 1.0

    total_monthly_cost = 0
    role_breakdown = {}

    for role, name in MANPOWER['ROLES']:
        count = headcount.get(role, 0)
        if count > 0:
            unit_cost = unit_monthly_cost(region, role, employment_type)
            cost = unit_cost * count * remote_multiplier
            total_monthly_cost += cost

            role_breakdown[role] = {
                'name': name,
                'count': count,
                'unit_cost': unit_cost,
                'total_cost': cost,
            }

    team_size = sum(headcount.get(role, 0) for role, _ in MANPOWER['ROLES'])

    return {
        'roles': role_breakdown,
        'monthly': total_monthly_cost,
        'total': total_monthly_cost * config['project_duration'],
        'team_size': team_size,
        'avg_cost_per_person': average_cost_per_person(total_monthly_cost, team_size),
    }

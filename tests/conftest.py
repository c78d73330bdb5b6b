"""
Shared pytest fixtures for AI Cost Compass tests.
"""
import copy
import sys
import pytest
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pricing_parameters import FACTORY, MANPOWER, ROBOT


@pytest.fixture
def factory_config():
    """Default data center: 500 H100 racks in the US (the reference scenario)."""
    return copy.deepcopy(FACTORY['DEFAULTS'])


@pytest.fixture
def manpower_config():
    """Default US full-time team of seven."""
    return copy.deepcopy(MANPOWER['DEFAULTS'])


@pytest.fixture
def empty_team_config():
    """Manpower configuration with every headcount at zero."""
    config = copy.deepcopy(MANPOWER['DEFAULTS'])
    config['headcount'] = {role: 0 for role, _ in MANPOWER['ROLES']}
    return config


@pytest.fixture
def robot_config():
    """Default robot project (the reference scenario)."""
    return copy.deepcopy(ROBOT['DEFAULTS'])

"""
AI Cost Compass - Input Parser Tests

Tests coercion of raw form values into calculator configurations.

Run with: pytest tests/test_input_parser.py -v
"""

import sys
import pytest
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pricing_parameters import FACTORY, MANPOWER, ROBOT
from cost_compass.utils.input_parser import (
    parse_numeric, coerce_int, coerce_float, coerce_choice, coerce_bool,
    build_factory_config, build_manpower_config, build_robot_config
)
from cost_compass.utils.factory_costs import compute_factory_cost
from cost_compass.utils.manpower_costs import compute_manpower_cost
from cost_compass.utils.robot_costs import compute_robot_cost


class TestParseNumeric:
    """Formatted and malformed numeric strings."""

    @pytest.mark.parametrize("raw,expected", [
        (42, 42.0),
        (0.15, 0.15),
        ("1,234.50", 1234.5),
        ("$56,421.00", 56421.0),
        ("12%", 12.0),
        ("(100)", -100.0),
        (" 7 ", 7.0),
        ("0", 0.0),
    ])
    def test_parses(self, raw, expected):
        assert parse_numeric(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", None, True, float('nan'), float('inf'), "1.2.3"])
    def test_falls_back(self, raw):
        assert parse_numeric(raw, default=-1.0) == -1.0


class TestCoercion:
    def test_int_truncates(self):
        assert coerce_int("7.9") == 7
        assert coerce_int(3.99) == 3

    def test_int_zero_is_kept(self):
        assert coerce_int(0, default=5) == 0

    def test_int_fallback(self):
        assert coerce_int("lots", default=3) == 3

    def test_float(self):
        assert coerce_float("0.20") == 0.2
        assert coerce_float("n/a", default=1.0) == 1.0

    def test_choice(self):
        assert coerce_choice('a100', FACTORY['GPU_TYPES'], 'h100') == 'a100'
        assert coerce_choice('b200', FACTORY['GPU_TYPES'], 'h100') == 'h100'

    @pytest.mark.parametrize("raw,expected", [
        (True, True), (False, False), ("yes", True), ("No", False),
        ("1", True), (0, False), (1, True), ("", False),
    ])
    def test_bool(self, raw, expected):
        assert coerce_bool(raw) is expected

    def test_bool_unrecognized_uses_default(self):
        assert coerce_bool("maybe", default=True) is True


class TestBuildFactoryConfig:
    """Factory form values -> configuration."""

    def test_empty_raw_gives_defaults(self):
        config, corrected = build_factory_config({})
        assert config == FACTORY['DEFAULTS']
        assert corrected == []

    def test_valid_values_pass_through(self):
        config, corrected = build_factory_config({
            'rack_count': '250', 'gpu_type': 'a100', 'pue': 1.2, 'region': 'eu'
        })
        assert config['rack_count'] == 250
        assert config['gpu_type'] == 'a100'
        assert config['pue'] == 1.2
        assert config['region'] == 'eu'
        assert corrected == []

    def test_malformed_numbers_use_fallbacks(self):
        config, corrected = build_factory_config({
            'rack_count': 'abc', 'gpu_per_rack': '', 'pue': 'bad', 'power_cost_per_kwh': None
        })
        assert config['rack_count'] == 0
        assert config['gpu_per_rack'] == 1
        assert config['pue'] == 1.0
        assert config['power_cost_per_kwh'] == 0.0
        assert set(corrected) == {'rack_count', 'gpu_per_rack', 'pue', 'power_cost_per_kwh'}

    def test_zero_is_not_a_correction(self):
        config, corrected = build_factory_config({'rack_count': 0, 'gpu_per_rack': 0})
        assert config['rack_count'] == 0
        assert config['gpu_per_rack'] == 0
        assert corrected == []

    def test_invalid_choice_reset_to_default(self):
        config, corrected = build_factory_config({'gpu_type': 'b200', 'region': 'mars'})
        assert config['gpu_type'] == 'h100'
        assert config['region'] == 'us'
        assert corrected == ['gpu_type', 'region']

    def test_defaults_not_shared(self):
        config, _ = build_factory_config({})
        config['rack_count'] = 1
        assert FACTORY['DEFAULTS']['rack_count'] == 500


class TestBuildManpowerConfig:
    """Manpower form values -> configuration."""

    def test_headcount_strings_from_grid(self):
        config, corrected = build_manpower_config({
            'headcount': {'ml_engineer': '3', 'ai_researcher': 'lots', 'product_manager': 0}
        })
        assert config['headcount']['ml_engineer'] == 3
        assert config['headcount']['ai_researcher'] == 0
        assert config['headcount']['product_manager'] == 0
        # Roles absent from the submitted team are unstaffed
        assert config['headcount']['data_scientist'] == 0
        assert corrected == ['headcount.ai_researcher']

    def test_unlisted_roles_count_as_zero(self):
        """A team with one listed role is a team of one."""
        config, corrected = build_manpower_config({'headcount': {'ml_engineer': 1}})
        result = compute_manpower_cost(config)

        assert result['team_size'] == 1, f"Expected 1, got {result['team_size']}"
        assert list(result['roles']) == ['ml_engineer']
        assert corrected == []

    def test_no_headcount_keeps_default_team(self):
        config, _ = build_manpower_config({'region': 'eu'})
        assert config['headcount'] == MANPOWER['DEFAULTS']['headcount']

    def test_huge_headcount_is_clamped(self):
        config, corrected = build_manpower_config({
            'headcount': {'ml_engineer': '1e200'}, 'project_duration': '1e200'
        })
        assert config['headcount']['ml_engineer'] == MANPOWER['LIMITS']['headcount']
        assert config['project_duration'] == MANPOWER['LIMITS']['project_duration']
        assert corrected == ['project_duration', 'headcount.ml_engineer']
        compute_manpower_cost(config)

    def test_duration_fallback_is_one(self):
        config, corrected = build_manpower_config({'project_duration': 'soon'})
        assert config['project_duration'] == 1
        assert corrected == ['project_duration']

    def test_remote_flag(self):
        config, _ = build_manpower_config({'remote_work': 'yes'})
        assert config['remote_work'] is True

    def test_invalid_choices(self):
        config, corrected = build_manpower_config({
            'region': 'mars', 'employment_type': 'contract', 'project_type': 'llm-finetuning'
        })
        assert config['region'] == 'us'
        assert config['employment_type'] == 'fulltime'
        assert config['project_type'] == 'llm-finetuning'
        assert corrected == ['region', 'employment_type']

    def test_defaults_not_shared(self):
        config, _ = build_manpower_config({'headcount': {'ml_engineer': 9}})
        assert MANPOWER['DEFAULTS']['headcount']['ml_engineer'] == 2
        assert config['headcount'] is not MANPOWER['DEFAULTS']['headcount']


class TestLimits:
    """Out-of-range numbers are clamped so the engines can always run."""

    def test_huge_factory_counts_clamped(self):
        config, corrected = build_factory_config({'rack_count': '1e200', 'gpu_per_rack': '1e200'})

        assert config['rack_count'] == FACTORY['LIMITS']['rack_count']
        assert config['gpu_per_rack'] == FACTORY['LIMITS']['gpu_per_rack']
        assert isinstance(config['rack_count'], int)
        assert corrected == ['rack_count', 'gpu_per_rack']

        result = compute_factory_cost(config)
        assert result['compute']['gpu_count'] == 1000000 * 1000

    def test_huge_float_clamped(self):
        config, corrected = build_robot_config({'power_cost': '1e308'})
        assert config['power_cost'] == ROBOT['LIMITS']['power_cost']
        assert isinstance(config['power_cost'], float)
        assert corrected == ['power_cost']
        compute_robot_cost(config)

    def test_negative_clamped_to_zero(self):
        config, corrected = build_factory_config({'staff_count': '(5)', 'pue': -1.5})
        assert config['staff_count'] == 0
        assert config['pue'] == 0.0
        assert set(corrected) == {'staff_count', 'pue'}

    def test_limit_itself_is_accepted(self):
        config, corrected = build_factory_config({'pue': FACTORY['LIMITS']['pue']})
        assert config['pue'] == FACTORY['LIMITS']['pue']
        assert corrected == []

    @pytest.mark.parametrize("params", [FACTORY, MANPOWER, ROBOT])
    def test_every_fallback_within_limits(self, params):
        for field, fallback in params['FALLBACKS'].items():
            assert 0 <= fallback <= params['LIMITS'][field], f"{field} fallback outside limits"


class TestBuildRobotConfig:
    """Robot form values -> configuration."""

    def test_values(self):
        config, corrected = build_robot_config({
            'team_size': '8', 'power_cost': '0.2', 'cloud_region': 'us-west'
        })
        assert config['team_size'] == 8
        assert config['power_cost'] == 0.2
        assert config['cloud_region'] == 'us-west'
        assert corrected == []

    def test_fallbacks_are_zero(self):
        config, corrected = build_robot_config({'camera_count': 'two', 'lidar_type': 'sick'})
        assert config['camera_count'] == 0
        assert config['lidar_type'] == ROBOT['DEFAULTS']['lidar_type']
        assert corrected == ['camera_count', 'lidar_type']

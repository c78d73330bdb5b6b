"""
AI Cost Compass - Factory Cost Engine Tests

Checks the data center breakdown against the reference scenario and the
CAPEX / TCO identities.

Run with: pytest tests/test_factory_costs.py -v
"""

import sys
import pytest
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from cost_compass.utils.factory_costs import compute_factory_cost


def power_only_config(rack_count):
    """Racks without GPUs: total power is exactly 2 kW per rack."""
    return {
        'facility_size': 0,
        'rack_count': rack_count,
        'gpu_type': 'l40s',
        'gpu_per_rack': 0,
        'power_cost_per_kwh': 0.0,
        'pue': 1.0,
        'staff_count': 0,
        'region': 'us',
    }


class TestReferenceScenario:
    """500 racks of 8x H100 in the US."""

    def test_compute_section(self, factory_config):
        result = compute_factory_cost(factory_config)
        compute = result['compute']

        assert compute['gpu_count'] == 4000
        assert compute['gpu_cost'] == 123_880_000
        assert compute['total_power_kw'] == 3800
        assert compute['total_power_with_pue'] == pytest.approx(6004)

    def test_infrastructure_section(self, factory_config):
        infra = compute_factory_cost(factory_config)['infrastructure']

        assert infra['racks'] == 1_500_000
        assert infra['networking'] == 15_000_000
        assert infra['cooling'] == 2_000_000, f"Expected one cooling block, got {infra['cooling']}"
        assert infra['backup'] == 1_500_000, f"Expected two backup blocks, got {infra['backup']}"
        assert infra['total'] == 20_000_000

    def test_building_and_operating(self, factory_config):
        result = compute_factory_cost(factory_config)

        assert result['building'] == 80_000_000
        assert result['operating']['annual_staff'] == 1_800_000
        # 6004 kW x 8760 h x $0.15
        assert result['operating']['annual_power'] == pytest.approx(7_889_256)
        assert result['operating']['total'] == pytest.approx(9_689_256)

    def test_totals(self, factory_config):
        totals = compute_factory_cost(factory_config)['totals']

        assert totals['capex'] == 223_880_000
        assert totals['opex_annual'] == pytest.approx(9_689_256)
        assert totals['five_year_tco'] == pytest.approx(272_326_280)


class TestIdentities:
    """CAPEX and TCO are exact sums of their parts."""

    @pytest.mark.parametrize("gpu_type,region,rack_count,gpu_per_rack", [
        ('h100', 'us', 500, 8),
        ('a100', 'eu', 120, 4),
        ('l40s', 'asia', 3, 2),
        ('h100', 'eu', 0, 8),
    ])
    def test_capex_and_tco_identities(self, factory_config, gpu_type, region, rack_count, gpu_per_rack):
        factory_config.update(gpu_type=gpu_type, region=region, rack_count=rack_count, gpu_per_rack=gpu_per_rack)
        result = compute_factory_cost(factory_config)
        infra = result['infrastructure']
        totals = result['totals']

        expected_capex = (result['building'] + infra['racks'] + infra['networking']
                          + result['compute']['gpu_cost'] + infra['cooling'] + infra['backup'])
        assert totals['capex'] == expected_capex
        assert totals['five_year_tco'] == totals['capex'] + totals['opex_annual'] * 5
        assert totals['opex_annual'] == result['operating']['total']

    def test_config_is_not_modified(self, factory_config):
        before = dict(factory_config)
        compute_factory_cost(factory_config)
        assert factory_config == before

    def test_each_call_returns_new_record(self, factory_config):
        first = compute_factory_cost(factory_config)
        first['totals']['capex'] = -1
        second = compute_factory_cost(factory_config)
        assert second['totals']['capex'] == 223_880_000


class TestCapacityBlocks:
    """Cooling and backup power are bought in whole blocks."""

    def test_cooling_at_block_boundary(self):
        result = compute_factory_cost(power_only_config(2500))
        assert result['compute']['total_power_kw'] == 5000
        assert result['infrastructure']['cooling'] == 2_000_000

    def test_cooling_one_kw_over_block_boundary(self):
        """30 racks of 549x L40S: (16470 x 300 W + 30 x 2000 W) / 1000 = 5001 kW."""
        config = power_only_config(30)
        config['gpu_per_rack'] = 549
        result = compute_factory_cost(config)

        assert result['compute']['total_power_kw'] == 5001
        assert result['infrastructure']['cooling'] == 4_000_000

    def test_cooling_just_over_block_boundary(self):
        result = compute_factory_cost(power_only_config(2501))
        assert result['compute']['total_power_kw'] == 5002
        assert result['infrastructure']['cooling'] == 4_000_000

    def test_backup_boundary(self):
        at_limit = compute_factory_cost(power_only_config(1000))
        over_limit = compute_factory_cost(power_only_config(1001))
        assert at_limit['infrastructure']['backup'] == 750_000
        assert over_limit['infrastructure']['backup'] == 1_500_000

    def test_blocks_sized_on_it_load(self):
        """PUE raises the power bill but not the number of blocks."""
        config = power_only_config(2500)
        config['pue'] = 2.0
        result = compute_factory_cost(config)
        assert result['compute']['total_power_with_pue'] == 10000
        assert result['infrastructure']['cooling'] == 2_000_000

    def test_zero_racks_needs_no_blocks(self, factory_config):
        factory_config['rack_count'] = 0
        result = compute_factory_cost(factory_config)

        assert result['compute']['gpu_count'] == 0
        assert result['compute']['total_power_kw'] == 0
        assert result['infrastructure']['cooling'] == 0
        assert result['infrastructure']['backup'] == 0
        assert result['operating']['annual_power'] == 0


class TestInvalidChoices:
    """Unknown enum values are rejected by the table lookup."""

    def test_unknown_gpu_type_raises(self, factory_config):
        factory_config['gpu_type'] = 'b200'
        with pytest.raises(KeyError):
            compute_factory_cost(factory_config)

    def test_unknown_region_raises(self, factory_config):
        factory_config['region'] = 'mars'
        with pytest.raises(KeyError):
            compute_factory_cost(factory_config)

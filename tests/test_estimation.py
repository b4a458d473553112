import unittest

from buildmyhome.domain.enums import HouseType, InteriorType, MaterialCategory
from buildmyhome.domain.estimation import (
    estimate_breakdown,
    estimate_cost,
    has_estimate_inputs,
    round_to_unit,
)
from buildmyhome.domain.home_configuration import MAX_LAND_AREA_SQFT, ConfigurationError, HomeConfiguration


def _config(**overrides):
    values = dict(
        land_area_sqft=1000,
        floors=1,
        house_type=HouseType.TRADITIONAL,
        interior_type=None,
        budget_range=None,
    )
    values.update(overrides)
    return HomeConfiguration(**values)


class EstimateCostTests(unittest.TestCase):
    def test_two_floor_modern_premium_with_one_material(self):
        config = _config(
            land_area_sqft=1200,
            floors=2,
            house_type=HouseType.MODERN,
            interior_type=InteriorType.PREMIUM,
            materials={MaterialCategory.FLOORING: '1'},
        )
        breakdown = estimate_breakdown(config)
        self.assertEqual(breakdown.base, 2400000)
        self.assertAlmostEqual(breakdown.floor_multiplier, 1.2)
        self.assertAlmostEqual(breakdown.type_multiplier, 1.10)
        self.assertAlmostEqual(breakdown.interior_multiplier, 1.20)
        self.assertAlmostEqual(breakdown.materials_factor, 1.05)
        self.assertAlmostEqual(breakdown.raw_total, 3992832, places=2)
        self.assertEqual(estimate_cost(config), 3993000)

    def test_plain_traditional_home_is_base_cost(self):
        self.assertEqual(estimate_cost(_config()), 2000000)

    def test_default_configuration(self):
        # modern x1.10, basic interior x1.00
        self.assertEqual(estimate_cost(HomeConfiguration()), 2200000)

    def test_result_is_multiple_of_thousand(self):
        for land in (100, 333, 1001, 1777, 2501):
            for floors in range(1, 11):
                for house_type in HouseType.ALL:
                    value = estimate_cost(_config(land_area_sqft=land, floors=floors, house_type=house_type))
                    self.assertEqual(value % 1000, 0)

    def test_more_floors_never_cheaper(self):
        previous = 0
        for floors in range(1, 11):
            value = estimate_cost(_config(floors=floors, house_type=HouseType.MODERN))
            self.assertGreaterEqual(value, previous)
            previous = value

    def test_minimalist_never_exceeds_contemporary(self):
        for land in (500, 1200, 4000):
            minimalist = estimate_cost(_config(land_area_sqft=land, house_type=HouseType.MINIMALIST))
            contemporary = estimate_cost(_config(land_area_sqft=land, house_type=HouseType.CONTEMPORARY))
            self.assertLessEqual(minimalist, contemporary)

    def test_each_floor_adds_a_fifth_of_the_ground_floor_cost(self):
        for house_type in HouseType.ALL:
            for interior_type in InteriorType.ALL:
                previous = None
                for floors in range(1, 11):
                    config = _config(
                        land_area_sqft=1337,
                        floors=floors,
                        house_type=house_type,
                        interior_type=interior_type,
                        materials={MaterialCategory.FLOORING: '1'},
                    )
                    breakdown = estimate_breakdown(config)
                    self.assertAlmostEqual(breakdown.floor_multiplier, 1 + 0.2 * (floors - 1))
                    ground_floor = (
                        breakdown.base
                        * breakdown.type_multiplier
                        * breakdown.interior_multiplier
                        * breakdown.materials_factor
                    )
                    if previous is not None:
                        self.assertAlmostEqual(breakdown.raw_total - previous, 0.2 * ground_floor, places=4)
                    previous = breakdown.raw_total

    def test_absent_interior_counts_as_basic(self):
        self.assertEqual(
            estimate_cost(_config(interior_type=None)),
            estimate_cost(_config(interior_type=InteriorType.BASIC)),
        )

    def test_each_material_category_adds_five_percent(self):
        materials = {category: 'x' for category in MaterialCategory.ALL}
        breakdown = estimate_breakdown(_config(materials=materials))
        self.assertAlmostEqual(breakdown.materials_factor, 1.30)
        self.assertEqual(breakdown.total, 2600000)

    def test_luxury_interior(self):
        self.assertEqual(estimate_cost(_config(interior_type=InteriorType.LUXURY)), 2800000)


class RoundingTests(unittest.TestCase):
    def test_half_rounds_up(self):
        self.assertEqual(round_to_unit(2500), 3000)
        self.assertEqual(round_to_unit(1500), 2000)

    def test_below_half_rounds_down(self):
        self.assertEqual(round_to_unit(1499.99), 1000)

    def test_zero(self):
        self.assertEqual(round_to_unit(0), 0)


class PreconditionTests(unittest.TestCase):
    def test_missing_land_area_blocks_estimate(self):
        self.assertFalse(has_estimate_inputs(_config(land_area_sqft=0)))

    def test_complete_inputs(self):
        self.assertTrue(has_estimate_inputs(_config()))


class EstimatePayloadTests(unittest.TestCase):
    def _payload(self, **overrides):
        payload = {
            'landAreaSqFt': 1200,
            'floors': 2,
            'bedrooms': 3,
            'bathrooms': 2,
            'houseType': 'modern',
        }
        payload.update(overrides)
        return payload

    def test_valid_payload(self):
        config = HomeConfiguration.from_estimate_payload(self._payload(interiorType='premium'))
        self.assertEqual(config.land_area_sqft, 1200)
        self.assertEqual(config.interior_type, 'premium')
        self.assertIsNone(config.budget_range)

    def test_missing_required_field(self):
        payload = self._payload()
        del payload['bedrooms']
        with self.assertRaises(ConfigurationError) as ctx:
            HomeConfiguration.from_estimate_payload(payload)
        self.assertEqual(ctx.exception.field, 'bedrooms')

    def test_land_area_below_minimum(self):
        with self.assertRaises(ConfigurationError) as ctx:
            HomeConfiguration.from_estimate_payload(self._payload(landAreaSqFt=99))
        self.assertEqual(ctx.exception.field, 'landAreaSqFt')

    def test_floors_out_of_range(self):
        for floors in (0, 11):
            with self.assertRaises(ConfigurationError):
                HomeConfiguration.from_estimate_payload(self._payload(floors=floors))

    def test_unknown_house_type(self):
        with self.assertRaises(ConfigurationError) as ctx:
            HomeConfiguration.from_estimate_payload(self._payload(houseType='gothic'))
        self.assertEqual(ctx.exception.field, 'houseType')

    def test_land_area_above_maximum(self):
        for bad in (MAX_LAND_AREA_SQFT + 1, 10 ** 306, 1e308):
            with self.assertRaises(ConfigurationError) as ctx:
                HomeConfiguration.from_estimate_payload(self._payload(landAreaSqFt=bad))
            self.assertEqual(ctx.exception.field, 'landAreaSqFt')

    def test_land_area_at_maximum_is_estimated(self):
        config = HomeConfiguration.from_estimate_payload(self._payload(landAreaSqFt=MAX_LAND_AREA_SQFT))
        self.assertEqual(estimate_cost(config) % 1000, 0)

    def test_non_integer_values_rejected(self):
        for bad in (12.5, True, 'abc'):
            with self.assertRaises(ConfigurationError):
                HomeConfiguration.from_estimate_payload(self._payload(landAreaSqFt=bad))


if __name__ == '__main__':
    unittest.main()

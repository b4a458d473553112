import unittest

from buildmyhome.domain.home_configuration import ConfigurationError, HomeConfiguration
from buildmyhome.domain.saved_plans import SavedPlanEntry, SavedPlanList


def _custom(**overrides):
    return SavedPlanEntry(custom_package=HomeConfiguration(**overrides))


class SavedPlanEntryTests(unittest.TestCase):
    def test_requires_exactly_one_variant(self):
        with self.assertRaises(ConfigurationError):
            SavedPlanEntry()
        with self.assertRaises(ConfigurationError):
            SavedPlanEntry(package_id=1, custom_package=HomeConfiguration())

    def test_custom_identity_ignores_other_fields(self):
        first = _custom(land_area_sqft=1200, floors=2, house_type='modern', bedrooms=2)
        second = _custom(land_area_sqft=1200, floors=2, house_type='modern', bedrooms=4, materials={'doors': '3'})
        self.assertTrue(first.same_plan(second))

    def test_custom_identity_differs_on_house_type(self):
        self.assertFalse(_custom(house_type='modern').same_plan(_custom(house_type='traditional')))

    def test_package_and_custom_never_match(self):
        self.assertFalse(SavedPlanEntry(package_id=1).same_plan(_custom()))

    def test_from_dict_parses_package_id(self):
        self.assertEqual(SavedPlanEntry.from_dict({'packageId': '7'}).package_id, 7)

    def test_from_dict_rejects_empty(self):
        with self.assertRaises(ConfigurationError):
            SavedPlanEntry.from_dict({})


class SavedPlanListTests(unittest.TestCase):
    def test_duplicate_custom_plan_is_not_added(self):
        plans = SavedPlanList()
        self.assertTrue(plans.add(_custom(land_area_sqft=1500)))
        self.assertFalse(plans.add(_custom(land_area_sqft=1500, bedrooms=5)))
        self.assertEqual(len(plans), 1)

    def test_duplicate_package_is_not_added(self):
        plans = SavedPlanList()
        plans.add(SavedPlanEntry(package_id=2))
        self.assertFalse(plans.add(SavedPlanEntry(package_id=2)))
        self.assertTrue(plans.add(SavedPlanEntry(package_id=3)))
        self.assertEqual(len(plans), 2)

    def test_remove_by_index(self):
        plans = SavedPlanList([SavedPlanEntry(package_id=1), SavedPlanEntry(package_id=2)])
        removed = plans.remove(0)
        self.assertEqual(removed.package_id, 1)
        self.assertIsNone(plans.remove(5))
        self.assertEqual([entry.package_id for entry in plans.entries], [2])

    def test_list_round_trip_keeps_order(self):
        plans = SavedPlanList([SavedPlanEntry(package_id=4), _custom(land_area_sqft=800)])
        restored = SavedPlanList.from_list(plans.to_list())
        self.assertEqual(restored.to_list(), plans.to_list())

    def test_clear(self):
        plans = SavedPlanList([SavedPlanEntry(package_id=1)])
        plans.clear()
        self.assertEqual(len(plans), 0)


if __name__ == '__main__':
    unittest.main()

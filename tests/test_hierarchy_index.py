"""
Tests for the record store and the code -> unit index.
"""

import unittest

from rwanda_geo.hierarchy import HierarchyIndex, RecordStore
from rwanda_geo.models import AdminLevel, District, Village

from tests.fixtures import append_unit, load_sample_store


class TestRecordStore(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.store = load_sample_store()

    def test_iteration_is_level_ordered(self):
        depths = [unit.depth for unit in self.store.iter_units()]
        self.assertEqual(depths, sorted(depths))

    def test_from_records(self):
        store = RecordStore.from_records({
            AdminLevel.PROVINCE: [{'code': 'RW-01', 'name': 'Kigali City', 'slug': 'kigali-city'}],
            AdminLevel.DISTRICT: [{'code': 'RW-D-01', 'name': 'Gasabo', 'slug': 'gasabo',
                                   'parentCode': 'RW-01'}],
        })
        self.assertEqual(store.counts()['total'], 2)
        self.assertIsInstance(store.districts[0], District)
        self.assertEqual(store.villages, ())

    def test_replace_collection_leaves_original_untouched(self):
        replaced = self.store.replace_collection(AdminLevel.VILLAGE, [])
        self.assertEqual(len(replaced.villages), 0)
        self.assertEqual(len(self.store.villages), 20)


class TestHierarchyIndex(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.store = load_sample_store()
        cls.index = HierarchyIndex(cls.store)

    def test_every_unit_is_found_by_its_code(self):
        for unit in self.store.iter_units():
            with self.subTest(code=unit.code):
                self.assertIs(self.index.lookup(unit.code), unit)
                self.assertTrue(self.index.is_valid_code(unit.code))
                self.assertIn(unit.code, self.index)

    def test_unknown_codes(self):
        for code in ['RW-99', 'rw-d-01', '', None, 7]:
            with self.subTest(code=code):
                self.assertIsNone(self.index.lookup(code))
                self.assertFalse(self.index.is_valid_code(code))

    def test_level_of_agrees_with_unit_level(self):
        for unit in self.store.iter_units():
            with self.subTest(code=unit.code):
                self.assertIs(self.index.level_of(unit.code), unit.level)

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(self.index.lookup(' RW-01 ').code, 'RW-01')
        self.assertTrue(self.index.is_valid_code(' RW-01 '))
        self.assertIs(self.index.level_of(' RW-01 '), AdminLevel.PROVINCE)

    def test_level_of_does_not_require_existence(self):
        self.assertIs(self.index.level_of('RW-V-99999'), AdminLevel.VILLAGE)
        self.assertIsNone(self.index.level_of('not-a-code'))

    def test_segmented_scheme_index(self):
        index = HierarchyIndex(self.store, code_scheme='segmented')
        self.assertEqual(index.scheme.name, 'segmented')
        self.assertIs(index.level_of('RW-KG-GAS'), AdminLevel.DISTRICT)
        self.assertIsNone(index.level_of('RW-D-01'))
        self.assertIsNotNone(index.lookup('RW-D-01'))

    def test_by_slug_is_exact_and_case_insensitive(self):
        self.assertEqual(self.index.by_slug('GASABO').code, 'RW-D-01')
        self.assertEqual(self.index.by_slug('gasabo-1').code, 'RW-V-00004')
        self.assertIsNone(self.index.by_slug('gasab'))

    def test_units_at_level(self):
        self.assertEqual(len(self.index.units_at(AdminLevel.SECTOR)), 9)
        self.assertEqual(len(self.index.units()), 51)
        self.assertEqual(len(self.index), 51)

    def test_duplicate_code_last_inserted_wins(self):
        duplicate = Village(code='RW-V-00001', name='Duplicate', slug='duplicate',
                            parent_code='RW-C-0001')
        index = HierarchyIndex(append_unit(self.store, duplicate))
        self.assertIs(index.lookup('RW-V-00001'), duplicate)
        self.assertEqual(len(index), 51)


if __name__ == '__main__':
    unittest.main()

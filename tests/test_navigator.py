"""
Tests for ancestor chains, children, siblings and descendants.
"""

import unittest

from rwanda_geo.hierarchy import HierarchyIndex, HierarchyNavigator
from rwanda_geo.models import AdminLevel

from tests.fixtures import load_sample_store, replace_unit


def codes(units):
    return [unit.code for unit in units]


class TestHierarchyNavigator(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.store = load_sample_store()
        cls.index = HierarchyIndex(cls.store)
        cls.navigator = HierarchyNavigator(cls.index)

    def test_ancestor_chain_is_root_first(self):
        self.assertEqual(codes(self.navigator.ancestor_chain('RW-V-00001')),
                         ['RW-01', 'RW-D-01', 'RW-S-001', 'RW-C-0001', 'RW-V-00001'])
        self.assertEqual(codes(self.navigator.ancestor_chain('RW-01')), ['RW-01'])
        self.assertEqual(self.navigator.ancestor_chain('RW-V-99999'), [])

    def test_chain_length_matches_depth_on_consistent_data(self):
        for unit in self.store.iter_units():
            with self.subTest(code=unit.code):
                chain = self.navigator.ancestor_chain(unit.code)
                self.assertEqual(len(chain), unit.depth)
                self.assertIs(chain[-1], unit)
                self.assertIs(chain[0].level, AdminLevel.PROVINCE)

    def test_every_unit_is_a_direct_child_of_its_parent(self):
        for unit in self.store.iter_units():
            if unit.parent_code is None:
                continue
            with self.subTest(code=unit.code):
                self.assertIn(unit, self.navigator.direct_children(unit.parent_code))
                self.assertEqual(self.navigator.parent(unit.code).code, unit.parent_code)

    def test_direct_children(self):
        self.assertEqual(codes(self.navigator.direct_children('RW-D-01')),
                         ['RW-S-001', 'RW-S-002', 'RW-S-003'])
        self.assertEqual(self.navigator.direct_children('RW-V-00001'), [])
        self.assertEqual(self.navigator.direct_children('RW-99'), [])

    def test_children_by_parent_code(self):
        self.assertEqual(codes(self.navigator.children('RW-01')),
                         ['RW-D-01', 'RW-D-02', 'RW-D-03'])
        self.assertEqual(self.navigator.children(None), [])
        self.assertEqual(self.navigator.children(' RW-01 '), self.navigator.children('RW-01'))

    def test_siblings_exclude_the_unit(self):
        self.assertEqual(codes(self.navigator.siblings('RW-S-001')), ['RW-S-002', 'RW-S-003'])
        self.assertEqual(codes(self.navigator.siblings('RW-D-04')), [])
        self.assertEqual(self.navigator.siblings('RW-01'), [])

    def test_descendants(self):
        descendants = self.navigator.descendants('RW-D-01')
        self.assertEqual(len(descendants), 15)
        self.assertEqual(codes(descendants[:3]), ['RW-S-001', 'RW-S-002', 'RW-S-003'])
        self.assertEqual(len(self.navigator.descendants('RW-01')), 26)
        self.assertEqual(self.navigator.descendants('RW-V-00001'), [])
        self.assertEqual(self.navigator.descendants('RW-99'), [])

    def test_descendant_count_matches_collections(self):
        total = sum(len(self.navigator.descendants(p.code)) for p in self.store.provinces)
        self.assertEqual(total, len(self.store) - len(self.store.provinces))

    def test_units_under_checks_level(self):
        self.assertEqual(len(self.navigator.units_under('RW-01', AdminLevel.PROVINCE)), 3)
        self.assertEqual(self.navigator.units_under('RW-01', AdminLevel.DISTRICT), [])

    def test_dangling_parent_ends_the_chain(self):
        store = replace_unit(self.store, 'RW-D-01', parent_code='RW-99')
        navigator = HierarchyNavigator(HierarchyIndex(store))
        self.assertEqual(codes(navigator.ancestor_chain('RW-S-001')), ['RW-D-01', 'RW-S-001'])

    def test_cycle_terminates(self):
        store = replace_unit(self.store, 'RW-01', parent_code='RW-V-00001')
        navigator = HierarchyNavigator(HierarchyIndex(store))
        self.assertEqual(codes(navigator.ancestor_chain('RW-V-00001')),
                         ['RW-01', 'RW-D-01', 'RW-S-001', 'RW-C-0001', 'RW-V-00001'])
        self.assertEqual(len(navigator.descendants('RW-01')), 26)


if __name__ == '__main__':
    unittest.main()

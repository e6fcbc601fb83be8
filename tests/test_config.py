"""
Tests for configuration validation and the exception hierarchy.
"""

import unittest

from rwanda_geo.config import DEFAULT_DATA_DIRECTORY, GeoConfig
from rwanda_geo.exceptions import ConfigurationError, DataLoadError, RwandaGeoError


class TestGeoConfig(unittest.TestCase):

    def test_defaults(self):
        config = GeoConfig()
        self.assertEqual(config.data_directory, DEFAULT_DATA_DIRECTORY)
        self.assertEqual(config.code_scheme, 'prefixed')
        self.assertEqual(config.fuzzy_max_distance, 3)
        self.assertEqual(config.suggestion_limit, 10)

    def test_log_level_is_normalized(self):
        self.assertEqual(GeoConfig(log_level='debug').log_level, 'DEBUG')

    def test_invalid_values_raise_configuration_error(self):
        invalid = [
            {'code_scheme': 'hierarchical'},
            {'fuzzy_max_distance': -1},
            {'suggestion_max_distance': 'three'},
            {'fuzzy_limit': 0},
            {'suggestion_limit': -5},
            {'suggestion_cache_size': -1},
            {'log_level': 'VERBOSE'},
        ]
        for kwargs in invalid:
            with self.subTest(**kwargs):
                with self.assertRaises(ConfigurationError) as ctx:
                    GeoConfig(**kwargs)
                self.assertEqual(ctx.exception.config_key, next(iter(kwargs)))

    def test_unknown_scheme_lists_valid_values(self):
        with self.assertRaises(ConfigurationError) as ctx:
            GeoConfig(code_scheme='hierarchical')
        self.assertEqual(ctx.exception.valid_values, ['prefixed', 'segmented'])
        self.assertEqual(ctx.exception.to_dict()['error_code'], 'CONFIGURATION_ERROR')

    def test_dict_round_trip(self):
        config = GeoConfig(code_scheme='segmented', fuzzy_limit=5, log_file='geo.log')
        self.assertEqual(GeoConfig.from_dict(config.to_dict()), config)


class TestExceptions(unittest.TestCase):

    def test_data_load_error_context(self):
        original = ValueError('Expected object or value')
        error = DataLoadError('bad file', file_path='/tmp/cells.json',
                              collection='cells', original_error=original)
        self.assertIsInstance(error, RwandaGeoError)
        details = error.to_dict()
        self.assertEqual(details['error_type'], 'DataLoadError')
        self.assertEqual(details['context']['collection'], 'cells')
        self.assertEqual(details['context']['original_error_type'], 'ValueError')


if __name__ == '__main__':
    unittest.main()

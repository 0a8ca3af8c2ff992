"""
Unit tests for the configuration singleton (unittest version).
"""

import logging
import os
import unittest
from unittest import mock

import gpexplorer as gx
import gpexplorer.num as gnp
from gpexplorer.config import (
    _GPExplorerConfig,
    clear_caches,
    get_backend,
    get_config,
    get_logger,
    set_log_level,
    set_seed,
)


class TestConfig(unittest.TestCase):

    def tearDown(self):
        set_seed(None)

    def test_defaults(self):
        config = get_config()
        self.assertIs(config, get_config())
        self.assertEqual(get_backend(), "numpy")
        self.assertEqual(config.jitter, 1e-6)
        self.assertEqual(config.n_display_points, 300)
        self.assertEqual(config.n_sample_points, 150)
        self.assertEqual(config.max_samples, 5)
        self.assertEqual(config.version, gx.__version__)
        self.assertIs(gnp.get_dtype(), gnp.float64)

    def test_update(self):
        config = get_config()
        previous = config.max_samples
        try:
            config.update(max_samples=3)
            self.assertEqual(gx.SampleHistory().capacity, 3)
        finally:
            config.update(max_samples=previous)
        with self.assertRaises(AttributeError):
            config.update(nugget=1e-8)

    def test_set_seed(self):
        set_seed(42)
        a = gnp.randn(5)
        set_seed(42)
        b = gnp.randn(5)
        self.assertTrue(gnp.allclose(a, b))
        self.assertEqual(get_config().seed, 42)

    def test_gammaln_cache(self):
        clear_caches()
        gnp.compute_gammaln(4)
        self.assertIn("gammaln", get_config().caches)
        clear_caches("gammaln")
        self.assertNotIn("gammaln", get_config().caches)

    def test_logger(self):
        logger = get_logger()
        self.assertEqual(logger.name, "gpexplorer")
        level = logger.level
        try:
            set_log_level(logging.DEBUG)
            with self.assertLogs("gpexplorer", level="DEBUG"):
                gx.compute_posterior([gx.Observation(0.0, 1.0)], [0.5], gx.Params())
        finally:
            set_log_level(level)

    def test_log_level_from_environment(self):
        logger = get_logger()
        level = logger.level
        try:
            with mock.patch.dict(os.environ, {"GPEXPLORER_LOG_LEVEL": "debug"}):
                _GPExplorerConfig()
            self.assertEqual(logger.level, logging.DEBUG)

            with mock.patch.dict(os.environ, {"GPEXPLORER_LOG_LEVEL": "verbose"}):
                with self.assertLogs("gpexplorer", level="DEBUG") as cm:
                    _GPExplorerConfig()
                    self.assertEqual(logger.level, logging.WARNING)
            self.assertIn("VERBOSE", cm.output[0])
        finally:
            set_log_level(level)


if __name__ == "__main__":
    unittest.main(verbosity=2)

# gpexplorer/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPExplorerConfig:
    def __init__(self):
        self.version = __version__
        self.backend = "numpy"
        self.dtype = float
        self.seed = None
        self.jitter = 1e-6
        self.n_display_points = 300
        self.n_sample_points = 150
        self.max_samples = 5
        self.caches = {}
        # logger lives in config
        self.logger = logging.getLogger("gpexplorer")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        level = os.environ.get("GPEXPLORER_LOG_LEVEL", "WARNING").upper()
        try:
            self.logger.setLevel(level)
        except ValueError:
            self.logger.setLevel(logging.WARNING)
            self.logger.warning(
                "Unknown GPEXPLORER_LOG_LEVEL '%s', using WARNING", level
            )

    def __str__(self):
        return (
            f"GPExplorerConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"seed={self.seed}, "
            f"jitter={self.jitter}, "
            f"n_display_points={self.n_display_points}, "
            f"n_sample_points={self.n_sample_points}, "
            f"max_samples={self.max_samples}, "
            f"caches={list(self.caches.keys())})"
        )

    def __repr__(self):
        return (
            f"<GPExplorerConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"seed={self.seed!r}, "
            f"jitter={self.jitter!r}, "
            f"max_samples={self.max_samples!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration field '{k}'")
            setattr(self, k, v)
        return self

    def clear_caches(self, name=None):
        if name is None:
            self.caches.clear()
        else:
            self.caches.pop(name, None)


_config = _GPExplorerConfig()


def get_config():
    return _config


def get_backend():
    return _config.backend


def set_seed(seed):
    """Seed the global generator used for sampling (None: unseeded)."""
    import gpexplorer.num as gnp

    _config.seed = seed
    gnp.set_seed(seed)


def clear_caches(name=None):
    _config.clear_caches(name)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)

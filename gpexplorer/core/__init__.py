# gpexplorer/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------

"""
Core components of the gpexplorer package.

This subpackage contains the GP inference engine: dense linear algebra
built around the Cholesky factorization, posterior mean/variance
computation, and posterior sampling.

Public API
----------
Model : class
    GP model façade over the routines below.
compute_posterior, posterior_covariance : functions
    Posterior on a test grid.
sample_from_gp, sample_paths : functions
    Prior or posterior draws on a grid.
Observation, Params, ParamBounds, Posterior, Sample : records
"""

from . import linalg
from .params import Observation, Params, ParamBounds, Posterior, Sample
from .posterior import compute_posterior, posterior_covariance
from .sample_paths import sample_from_gp, sample_paths
from .model import Model
from gpexplorer.errors import NotPositiveDefiniteError, UnknownKernelError

__all__ = [
    "Model",
    "linalg",
    "compute_posterior",
    "posterior_covariance",
    "sample_from_gp",
    "sample_paths",
    "Observation",
    "Params",
    "ParamBounds",
    "Posterior",
    "Sample",
    "NotPositiveDefiniteError",
    "UnknownKernelError",
]

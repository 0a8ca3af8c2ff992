# gpexplorer/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Gaussian Process kernels.

This subpackage provides the fixed family of stationary covariance
functions used by the GP engine.

Modules
-------
gaussian
    Gaussian (RBF) kernel.
exponential
    Exponential kernel (Matérn 1/2).
matern
    Matérn family of kernels with half-integer regularity.
stationary
    Closed kernel enumeration, resolution and covariance matrices.

Public API
-----------
- Correlation functions of the scaled distance:
    gaussian_kernel, exponential_kernel, maternp_kernel
- Kernel selection:
    KernelId, kernel_id, correlation, resolve_kernel
- Covariance matrices:
    covariance
"""

from .exponential import exponential_kernel
from .gaussian import gaussian_kernel
from .matern import maternp_kernel
from .stationary import KernelId, kernel_id, correlation, resolve_kernel, covariance

__all__ = [
    # Correlation functions
    "exponential_kernel",
    "gaussian_kernel",
    "maternp_kernel",
    # Selection
    "KernelId",
    "kernel_id",
    "correlation",
    "resolve_kernel",
    # Covariance
    "covariance",
]

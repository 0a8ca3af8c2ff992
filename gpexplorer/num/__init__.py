# gpexplorer/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""Numerical backend namespace for GPexplorer."""

from gpexplorer.config import get_backend

from . import shared as _shared

_gpexplorer_backend_ = get_backend()

if _gpexplorer_backend_ == "numpy":
    from . import numpy_backend as _backend
else:
    raise RuntimeError("Only the 'numpy' backend is available.")

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
get_dtype = _shared.get_dtype
compute_gammaln = _shared.compute_gammaln

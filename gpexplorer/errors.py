# gpexplorer/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""Exceptions raised by GPexplorer."""
import gpexplorer.num as gnp


class NotPositiveDefiniteError(gnp.LinAlgError):
    """A Cholesky pivot was not positive.

    Typically raised when the noise level is zero and two observations
    share (nearly) the same x value. Callers may treat it as recoverable
    and keep their previous result.
    """


class UnknownKernelError(ValueError):
    """A kernel identifier outside the supported set was requested."""

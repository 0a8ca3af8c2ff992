# gpexplorer/core/params.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Data records exchanged between the GP engine and its callers.

- Observation: an immutable (x, y) pair.
- Params: hyperparameters (length scale, signal variance, noise level,
  kernel). The kernel name is validated when the record is built, so the
  engine always receives a resolvable kernel.
- ParamBounds: the ranges allowed by the parameter controls.
- Posterior: posterior mean and variance on a test grid.
- Sample: one realization of the GP on a grid.
"""
from collections import namedtuple
from typing import Tuple

import gpexplorer.num as gnp
from gpexplorer.kernel import KernelId, kernel_id

Observation = namedtuple("Observation", ["x", "y"])
Posterior = namedtuple("Posterior", ["mean", "variance"])
Sample = namedtuple("Sample", ["x", "y"])


class Params:
    """GP hyperparameters.

    Attributes
    ----------
    lengthscale : float
        Length scale, > 0.
    variance : float
        Signal variance, > 0.
    noise : float
        Observation noise standard deviation, >= 0. The noise variance
        noise**2 is added to the diagonal of the covariance matrix of
        the observations.
    kernel : KernelId
    """

    __slots__ = ("lengthscale", "variance", "noise", "kernel")

    def __init__(self, lengthscale=1.0, variance=1.0, noise=0.1, kernel="rbf"):
        self.lengthscale = float(lengthscale)
        self.variance = float(variance)
        self.noise = float(noise)
        self.kernel = kernel_id(kernel)

    def __repr__(self):
        return (
            f"Params(lengthscale={self.lengthscale}, variance={self.variance}, "
            f"noise={self.noise}, kernel={self.kernel.value!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, Params):
            return NotImplemented
        return self.astuple() == other.astuple()

    def __hash__(self):
        return hash(self.astuple())

    def astuple(self):
        return (self.lengthscale, self.variance, self.noise, self.kernel)

    @property
    def noise_variance(self):
        return self.noise**2

    def replace(self, **changes):
        """Return a copy of the record with some fields changed."""
        fields = dict(
            lengthscale=self.lengthscale,
            variance=self.variance,
            noise=self.noise,
            kernel=self.kernel,
        )
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")
        fields.update(changes)
        return Params(**fields)


class ParamBounds:
    """Ranges of the parameter controls.

    The minimums are strictly positive for the length scale and the
    signal variance; the noise level may go down to zero.
    """

    def __init__(
        self,
        lengthscale: Tuple[float, float] = (0.1, 5.0),
        variance: Tuple[float, float] = (0.1, 5.0),
        noise: Tuple[float, float] = (0.0, 1.0),
    ):
        for name, (low, high) in (
            ("lengthscale", lengthscale),
            ("variance", variance),
            ("noise", noise),
        ):
            if low > high:
                raise ValueError(f"Empty range for {name}: ({low}, {high})")
        if lengthscale[0] <= 0.0 or variance[0] <= 0.0 or noise[0] < 0.0:
            raise ValueError("Parameter ranges must stay in the valid domain")
        self.lengthscale = tuple(lengthscale)
        self.variance = tuple(variance)
        self.noise = tuple(noise)

    def clip(self, params: Params) -> Params:
        """Return ``params`` clamped to the ranges."""
        return params.replace(
            lengthscale=gnp.clip(params.lengthscale, *self.lengthscale).item(),
            variance=gnp.clip(params.variance, *self.variance).item(),
            noise=gnp.clip(params.noise, *self.noise).item(),
        )

    def minimum(self, kernel=KernelId.RBF) -> Params:
        return Params(self.lengthscale[0], self.variance[0], self.noise[0], kernel)

    def maximum(self, kernel=KernelId.RBF) -> Params:
        return Params(self.lengthscale[1], self.variance[1], self.noise[1], kernel)

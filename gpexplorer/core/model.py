# gpexplorer/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
import gpexplorer.num as gnp
from gpexplorer.kernel import covariance as _covariance

from . import posterior
from .sample_paths import sample_from_gp, sample_paths as _sample_paths
from .params import Params, Sample


class Model:
    """Zero-mean Gaussian Process (GP) model on the real line.

    Attributes
    ----------
    params : Params
        Hyperparameters: length scale, signal variance, noise level and
        kernel. The model never modifies them; build a new record (for
        instance with ``params.replace(...)``) to change them.

    Public API (methods)
    --------------------
    covariance
        Prior covariance between two sets of points.
    predict
        Posterior mean/variance at target points.
    sample
        One prior or posterior sample path, as a `Sample`.
    sample_paths
        Several sample paths on a grid.

    Examples
    --------
    >>> import gpexplorer as gx
    >>> model = gx.Model(gx.Params(lengthscale=1.0, variance=1.0, noise=0.1))
    >>> observations = [gx.Observation(0.0, 1.0)]
    >>> zt_mean, zt_var = model.predict(observations, [0.0])
    """

    def __init__(self, params=None):
        self.params = Params() if params is None else params

    def __repr__(self):
        output = str("<gpexplorer.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Kernel: {self.params.kernel.value}\n"
            f"  Length scale: {self.params.lengthscale}\n"
            f"  Signal variance: {self.params.variance}\n"
            f"  Noise level: {self.params.noise}"
        )

    def covariance(self, x, y=None, pairwise=False):
        """Prior covariance k(x, y) (y=None means y := x), without noise."""
        p = self.params
        return _covariance(p.kernel, x, y, p.lengthscale, p.variance, pairwise)

    def predict(self, observations, xt):
        """Performs a prediction at target points xt given the observations.

        Parameters
        ----------
        observations : sequence of Observation or (x, y) pairs
        xt : array_like, shape (nt,)

        Returns
        -------
        Posterior
            Posterior mean and (nonnegative) variance at xt.
        """
        return posterior.compute_posterior(observations, xt, self.params)

    def sample(self, observations, xt, rng=None):
        """Draw one sample path at xt and return it with its grid."""
        xt_ = gnp.asarray(xt, dtype=gnp.float64).reshape(-1)
        zt = sample_from_gp(observations, xt_, self.params, rng=rng)
        return Sample(xt_, zt)

    def sample_paths(self, observations, xt, nb_paths, rng=None):
        """Generates ``nb_paths`` sample paths at xt, shape (nt, nb_paths)."""
        return _sample_paths(
            observations, xt, self.params, nb_paths, rng=rng
        )

# gpexplorer/core/posterior.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Posterior mean, variance and covariance of a zero-mean GP.

With observations (xi, zi), noise standard deviation sigma_n and test
points xt, the posterior is computed from

    K   = k(xi, xi) + sigma_n^2 I,      K = L Lᵀ,
    Kit = k(xi, xt),
    alpha = K^{-1} zi,                  mean = Kitᵀ alpha,
    V   = L^{-1} Kit,                   variance = k(xt, xt) - diag(Vᵀ V).

Functions
---------
compute_posterior(observations, xt, params)
    Posterior mean and marginal variances on xt.

posterior_covariance(observations, xt, params)
    Posterior mean and full covariance matrix on xt.
"""
import gpexplorer.num as gnp
from gpexplorer.config import get_logger
from gpexplorer.kernel import covariance
from . import linalg
from .params import Posterior

_logger = get_logger()


# --------------------------------------------------------------------------
# Public entry points
# --------------------------------------------------------------------------
def compute_posterior(observations, xt, params):
    """Compute the posterior mean and variance at the test points xt.

    Parameters
    ----------
    observations : sequence of Observation or (x, y) pairs
        May be empty, in which case the prior is returned.
    xt : array_like, shape (m,)
        Test points.
    params : Params

    Returns
    -------
    Posterior
        ``mean`` and ``variance``, both of shape (m,). Variances are
        clamped at zero.

    Raises
    ------
    NotPositiveDefiniteError
        If the covariance matrix of the observations cannot be factorized,
        typically with zero noise and duplicated x values.
    """
    xi, zi = observation_arrays(observations)
    xt = _as_grid(xt)
    if xt.shape[0] == 0:
        return Posterior(gnp.zeros(0), gnp.zeros(0))
    zt_prior_variance = covariance(
        params.kernel, xt, None, params.lengthscale, params.variance, pairwise=True
    )

    if xi.shape[0] == 0:
        return Posterior(gnp.zeros(xt.shape[0]), zt_prior_variance)

    _logger.debug(
        "posterior: ni=%d, nt=%d, kernel=%s", xi.shape[0], xt.shape[0], params.kernel.value
    )
    L, Kit = _factorize(xi, xt, params)
    alpha = linalg.cholesky_solve(L, zi)
    zt_posterior_mean = gnp.matmul(Kit.T, alpha)

    V = linalg.solve_l(L, Kit)
    zt_posterior_variance = zt_prior_variance - gnp.sum(V * V, axis=0)
    zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)

    return Posterior(zt_posterior_mean, zt_posterior_variance)


def posterior_covariance(observations, xt, params):
    """Compute the posterior mean and full covariance matrix on xt.

    Returns
    -------
    zt_posterior_mean : ndarray, shape (m,)
    zt_posterior_cov : ndarray, shape (m, m)
        k(xt, xt) - Vᵀ V with V = L^{-1} k(xi, xt); the prior covariance
        when there are no observations.
    """
    xi, zi = observation_arrays(observations)
    xt = _as_grid(xt)
    if xt.shape[0] == 0:
        return gnp.zeros(0), gnp.zeros((0, 0))
    Ktt = covariance(params.kernel, xt, None, params.lengthscale, params.variance)

    if xi.shape[0] == 0:
        return gnp.zeros(xt.shape[0]), Ktt

    L, Kit = _factorize(xi, xt, params)
    alpha = linalg.cholesky_solve(L, zi)
    V = linalg.solve_l(L, Kit)
    return gnp.matmul(Kit.T, alpha), Ktt - gnp.matmul(V.T, V)


def observation_arrays(observations):
    """Split a sequence of (x, y) observations into two 1D arrays."""
    data = gnp.asarray(list(observations), dtype=gnp.float64)
    if data.size == 0:
        return gnp.zeros(0), gnp.zeros(0)
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError("observations must be a sequence of (x, y) pairs")
    return data[:, 0], data[:, 1]


# --------------------------------------------------------------------------
# Internal helpers
# --------------------------------------------------------------------------
def _as_grid(xt):
    xt = gnp.asarray(xt, dtype=gnp.float64)
    if xt.ndim > 1:
        raise ValueError(f"test points must be a 1D sequence, got shape {xt.shape}")
    return xt.reshape(-1)


def _factorize(xi, xt, params):
    """Return the Cholesky factor of K(xi, xi) + noise and K(xi, xt)."""
    Kii = covariance(params.kernel, xi, None, params.lengthscale, params.variance)
    Kii = Kii + params.noise_variance * gnp.eye(xi.shape[0])
    Kit = covariance(params.kernel, xi, xt, params.lengthscale, params.variance)
    return linalg.cholesky(Kii), Kit

# gpexplorer/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Sampling routines for the GP engine.

This module provides:
- Draws of GP paths on a grid `xt` from the prior (no observations) or
  from the posterior given the observations.
- A single-path convenience used by interactive callers.

Draws are not reproducible unless the caller passes a seeded
`numpy.random.Generator` or seeds the global generator.
"""
import gpexplorer.num as gnp
from gpexplorer.config import get_config, get_logger
from . import linalg
from .posterior import posterior_covariance

_logger = get_logger()


def sample_paths(observations, xt, params, nb_paths, rng=None, jitter=None):
    """Generates ``nb_paths`` sample paths on ``xt`` from the GP given the
    observations.

    Parameters
    ----------
    observations : sequence of Observation or (x, y) pairs
        Conditioning data; an empty sequence gives prior sample paths.
    xt : array_like, shape (nt,)
        Points where the sample paths are generated.
    params : Params
    nb_paths : int
        Number of sample paths to generate.
    rng : numpy.random.Generator, optional
        Source of standard normal variates. Defaults to the global
        generator of `gpexplorer.num`.
    jitter : float, optional
        Value added to the diagonal of the covariance before the
        factorization. Defaults to ``get_config().jitter``.

    Returns
    -------
    ndarray, shape (nt, nb_paths)
        Sample paths at the points xt.

    Raises
    ------
    NotPositiveDefiniteError
        If the observations or the jittered posterior covariance cannot
        be factorized.

    Notes
    -----
    With Σ + jitter I = C Cᵀ, paths are drawn as mean + C @ N(0, I).
    """
    if jitter is None:
        jitter = get_config().jitter
    zt_mean, zt_cov = posterior_covariance(observations, xt, params)
    nt = zt_mean.shape[0]
    if nt == 0:
        return gnp.zeros((0, nb_paths))

    zt_cov = 0.5 * (zt_cov + zt_cov.T) + jitter * gnp.eye(nt)
    C = linalg.cholesky(zt_cov)
    _logger.debug("sample_paths: nt=%d, nb_paths=%d, jitter=%g", nt, nb_paths, jitter)

    zsim = gnp.matmul(C, gnp.randn(nt, nb_paths, rng=rng))
    return zt_mean.reshape(-1, 1) + zsim


def sample_from_gp(observations, xt, params, rng=None):
    """Draw one realization of the GP at ``xt``.

    Returns
    -------
    ndarray, shape (nt,)
    """
    return sample_paths(observations, xt, params, 1, rng=rng)[:, 0]

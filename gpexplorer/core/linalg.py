# gpexplorer/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Dense linear-algebra utilities used by the GP engine.

The helpers are built on top of `gpexplorer.num as gnp` and know nothing
about Gaussian processes. Linear systems with a symmetric positive
definite matrix A are solved through its Cholesky factor L (A = L Lᵀ) and
two triangular solves; no explicit inverse is ever formed.

Shape mismatches are programming errors and raise ValueError. A failed
factorization raises NotPositiveDefiniteError.
"""
import gpexplorer.num as gnp
from gpexplorer.errors import NotPositiveDefiniteError


def linspace(start, end, n):
    """Return ``n`` evenly spaced values from ``start`` to ``end`` inclusive.

    ``n == 1`` gives ``[start]`` and ``n == 0`` an empty grid.
    """
    if n < 0:
        raise ValueError(f"linspace needs n >= 0, got {n}")
    return gnp.linspace(float(start), float(end), int(n))


def mat_mul(A, B):
    """Dense matrix product A B."""
    A = gnp.asarray(A, dtype=gnp.float64)
    B = gnp.asarray(B, dtype=gnp.float64)
    if A.ndim != 2 or B.ndim != 2:
        raise ValueError("mat_mul expects two 2D arrays")
    if A.shape[1] != B.shape[0]:
        raise ValueError(f"mat_mul: shapes {A.shape} and {B.shape} not aligned")
    return gnp.matmul(A, B)


def mat_vec(A, v):
    """Dense matrix-vector product A v."""
    A = gnp.asarray(A, dtype=gnp.float64)
    v = gnp.asarray(v, dtype=gnp.float64)
    if A.ndim != 2 or v.ndim != 1:
        raise ValueError("mat_vec expects a 2D array and a 1D array")
    if A.shape[1] != v.shape[0]:
        raise ValueError(f"mat_vec: shapes {A.shape} and {v.shape} not aligned")
    return gnp.matmul(A, v)


def cholesky(A):
    """Return the lower-triangular factor L such that L Lᵀ = A.

    Parameters
    ----------
    A : array_like, shape (n, n)
        Symmetric positive definite matrix. Only its lower triangle is read.

    Returns
    -------
    L : ndarray, shape (n, n)

    Raises
    ------
    NotPositiveDefiniteError
        If a pivot is negative, not finite, or zero up to rounding
        (below n * eps * max|diag(A)|).
    """
    A = gnp.asarray(A, dtype=gnp.float64)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"cholesky expects a square matrix, got shape {A.shape}")
    try:
        L = gnp.cholesky(A)
    except gnp.LinAlgError as exc:
        raise NotPositiveDefiniteError(
            f"Matrix of size {A.shape[0]} is not positive definite ({exc})"
        ) from exc
    if not gnp.all(gnp.isfinite(L)):
        raise NotPositiveDefiniteError(
            "Cholesky factorization produced non-finite values"
        )
    n = A.shape[0]
    if n > 0:
        # pivots below rounding level are zero pivots
        tol = n * gnp.eps * gnp.max(gnp.abs(gnp.diag(A)))
        pivots = gnp.diag(L) ** 2
        if gnp.min(pivots) <= tol:
            raise NotPositiveDefiniteError(
                f"Matrix of size {n} is numerically singular "
                f"(smallest pivot {gnp.min(pivots):.3g})"
            )
    return L


def _check_triangular_system(L, b, name):
    if L.ndim != 2 or L.shape[0] != L.shape[1]:
        raise ValueError(f"{name}: L must be square, got shape {L.shape}")
    if b.ndim not in (1, 2) or b.shape[0] != L.shape[0]:
        raise ValueError(f"{name}: shapes {L.shape} and {b.shape} not aligned")


def solve_l(L, b):
    """Forward substitution: solve L y = b for lower-triangular L.

    ``b`` may be a vector (n,) or a matrix of right-hand sides (n, k).
    """
    L = gnp.asarray(L, dtype=gnp.float64)
    b = gnp.asarray(b, dtype=gnp.float64)
    _check_triangular_system(L, b, "solve_l")
    return gnp.solve_triangular(L, b, lower=True)


def solve_lt(L, b):
    """Back substitution: solve Lᵀ x = b for lower-triangular L."""
    L = gnp.asarray(L, dtype=gnp.float64)
    b = gnp.asarray(b, dtype=gnp.float64)
    _check_triangular_system(L, b, "solve_lt")
    return gnp.solve_triangular(L, b, lower=True, trans="T")


def cholesky_solve(L, b):
    """Solve (L Lᵀ) x = b given the Cholesky factor L."""
    return solve_lt(L, solve_l(L, b))

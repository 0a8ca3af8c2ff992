# gpexplorer/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""Backend-independent helpers for gpexplorer.num."""

from gpexplorer.config import get_config


def get_dtype():
    return get_config().dtype_resolved


def compute_gammaln(up_to_p: int):
    """
    Return gammaln(k) for k = 0, ..., 2*up_to_p + 1 as a 1D backend array.
    Grows and caches a single table in _config.caches["gammaln"]["table"].
    """
    import gpexplorer.num as gnp

    n = 2 * up_to_p + 2
    cache = get_config().caches.setdefault("gammaln", {})
    table = cache.get("table")

    if table is None or table.shape[0] < n:
        table = gnp.asarray(gnp.gammaln(gnp.arange(n)))
        cache["table"] = table

    return table[:n]

# gpexplorer/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
GPexplorer plotting utilities.
"""

from .plotutils import Figure, render_session

__all__ = ["Figure", "render_session", "plotutils"]

from . import plotutils

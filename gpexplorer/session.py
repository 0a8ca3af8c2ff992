# gpexplorer/session.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Interactive session state for the GP explorer.

A `Session` gathers what a front end manipulates (observation points,
parameter controls, visible range, sample history) and calls the GP
engine whenever one of them changes. Front ends subscribe to the session
to be told when to redraw; the engine itself stays pull-based and free of
side effects.

Classes
-------
SampleHistory
    Fixed-capacity history of samples, oldest evicted first.
Viewport
    Visible x/y range; provides the test grids.
Session
    State container dispatching change notifications.
"""
from collections import deque

import gpexplorer.num as gnp
from gpexplorer.config import get_config, get_logger
from gpexplorer.core import linalg
from gpexplorer.core.model import Model
from gpexplorer.core.params import Observation, ParamBounds, Params
from gpexplorer.errors import NotPositiveDefiniteError

_logger = get_logger()

POSTERIOR_UNDEFINED = "posterior undefined for these inputs"


class SampleHistory:
    """Ring buffer of the most recent samples."""

    def __init__(self, capacity=None):
        if capacity is None:
            capacity = get_config().max_samples
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._samples = deque(maxlen=int(capacity))

    @property
    def capacity(self):
        return self._samples.maxlen

    def append(self, sample):
        self._samples.append(sample)

    def clear(self):
        self._samples.clear()

    def __len__(self):
        return len(self._samples)

    def __iter__(self):
        return iter(self._samples)

    def __getitem__(self, i):
        return self._samples[i]


class Viewport:
    """Visible range of the canvas."""

    def __init__(self, xmin=-5.0, xmax=5.0, ymin=-3.0, ymax=3.0):
        if not xmin < xmax:
            raise ValueError(f"Viewport needs xmin < xmax, got ({xmin}, {xmax})")
        if not ymin < ymax:
            raise ValueError(f"Viewport needs ymin < ymax, got ({ymin}, {ymax})")
        self.xmin, self.xmax = float(xmin), float(xmax)
        self.ymin, self.ymax = float(ymin), float(ymax)

    def __repr__(self):
        return (
            f"Viewport(xmin={self.xmin}, xmax={self.xmax}, "
            f"ymin={self.ymin}, ymax={self.ymax})"
        )

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return (self.xmin, self.xmax, self.ymin, self.ymax) == (
            other.xmin,
            other.xmax,
            other.ymin,
            other.ymax,
        )

    def grid(self, n):
        """Evenly spaced grid of ``n`` points over the visible x range."""
        return linalg.linspace(self.xmin, self.xmax, n)

    def zoom(self, factor, center=None):
        """Return a viewport scaled by ``factor`` around ``center``.

        factor > 1 zooms out, factor < 1 zooms in. Both axes are scaled.
        """
        if factor <= 0:
            raise ValueError("zoom factor must be positive")
        if center is None:
            cx, cy = 0.5 * (self.xmin + self.xmax), 0.5 * (self.ymin + self.ymax)
        else:
            cx, cy = center
        return Viewport(
            cx + factor * (self.xmin - cx),
            cx + factor * (self.xmax - cx),
            cy + factor * (self.ymin - cy),
            cy + factor * (self.ymax - cy),
        )

    def pan(self, dx, dy=0.0):
        """Return a viewport shifted by (dx, dy)."""
        return Viewport(self.xmin + dx, self.xmax + dx, self.ymin + dy, self.ymax + dy)


class Session:
    """State container of the explorer.

    Parameters
    ----------
    params : Params, optional
    viewport : Viewport, optional
    bounds : ParamBounds, optional
        Ranges applied to every parameter change.
    n_display_points, n_sample_points, max_samples : int, optional
        Default to the corresponding configuration fields.

    Notes
    -----
    Subscribers are called as ``callback(session)`` after every change.
    When the posterior cannot be computed (NotPositiveDefiniteError), the
    last good posterior is kept, ``error`` holds a message and the
    subscribers are still notified.
    """

    def __init__(
        self,
        params=None,
        viewport=None,
        bounds=None,
        n_display_points=None,
        n_sample_points=None,
        max_samples=None,
    ):
        config = get_config()
        self.bounds = ParamBounds() if bounds is None else bounds
        self.params = self.bounds.clip(Params() if params is None else params)
        self.viewport = Viewport() if viewport is None else viewport
        self.n_display_points = n_display_points or config.n_display_points
        self.n_sample_points = n_sample_points or config.n_sample_points
        self.samples = SampleHistory(max_samples or config.max_samples)
        self.observations = ()
        self.posterior = None
        self.xt = None
        self.error = None
        self._subscribers = []
        self.refresh()

    @property
    def model(self):
        return Model(self.params)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, callback):
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        self._subscribers.remove(callback)

    def _notify(self):
        for callback in list(self._subscribers):
            callback(self)

    # ------------------------------------------------------------------
    # Changes
    # ------------------------------------------------------------------
    def add_point(self, x, y):
        self.observations = self.observations + (Observation(float(x), float(y)),)
        self.refresh()

    def add_random_points(self, n, rng=None):
        """Add ``n`` points drawn uniformly in the visible range."""
        v = self.viewport
        x = gnp.uniform(v.xmin, v.xmax, size=n, rng=rng)
        y = gnp.uniform(0.8 * v.ymin, 0.8 * v.ymax, size=n, rng=rng)
        self.observations = self.observations + tuple(
            Observation(float(xk), float(yk)) for xk, yk in zip(x, y)
        )
        self.refresh()

    def clear_points(self):
        self.observations = ()
        self.samples.clear()
        self.refresh()

    def set_params(self, **changes):
        self.params = self.bounds.clip(self.params.replace(**changes))
        self.refresh()

    def set_viewport(self, viewport):
        self.viewport = viewport
        self.refresh()

    def clear_samples(self):
        self.samples.clear()
        self._notify()

    def draw_sample(self, rng=None):
        """Draw a sample on the sampling grid and append it to the history.

        Returns the new `Sample`, or None if the covariance could not be
        factorized (``error`` is then set).
        """
        xs = self.viewport.grid(self.n_sample_points)
        try:
            sample = self.model.sample(self.observations, xs, rng=rng)
        except NotPositiveDefiniteError as exc:
            _logger.warning("Sampling failed: %s", exc)
            self.error = POSTERIOR_UNDEFINED
            self._notify()
            return None
        self.samples.append(sample)
        self._notify()
        return sample

    def refresh(self):
        """Recompute the posterior on the display grid and notify."""
        xt = self.viewport.grid(self.n_display_points)
        try:
            self.posterior = self.model.predict(self.observations, xt)
            self.xt = xt
            self.error = None
        except NotPositiveDefiniteError as exc:
            _logger.warning("Keeping previous posterior: %s", exc)
            self.error = POSTERIOR_UNDEFINED
        self._notify()

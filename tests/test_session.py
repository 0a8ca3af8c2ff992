"""
Unit tests for the interactive session state (unittest version).
"""

import unittest

import gpexplorer.num as gnp
from gpexplorer.config import get_config
from gpexplorer.core import Observation, Params
from gpexplorer.errors import UnknownKernelError
from gpexplorer.kernel import KernelId
from gpexplorer.session import POSTERIOR_UNDEFINED, SampleHistory, Session, Viewport


class TestSampleHistory(unittest.TestCase):

    def test_capacity(self):
        history = SampleHistory(5)
        for i in range(7):
            history.append(i)
        self.assertEqual(len(history), 5)
        self.assertEqual(list(history), [2, 3, 4, 5, 6])
        self.assertEqual(history[0], 2)
        self.assertEqual(history.capacity, 5)

    def test_default_capacity(self):
        self.assertEqual(SampleHistory().capacity, get_config().max_samples)

    def test_clear(self):
        history = SampleHistory(2)
        history.append("a")
        history.clear()
        self.assertEqual(len(history), 0)

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            SampleHistory(0)


class TestViewport(unittest.TestCase):

    def test_grid(self):
        v = Viewport(-2.0, 6.0, -1.0, 1.0)
        t = v.grid(300)
        self.assertEqual(t.shape, (300,))
        self.assertEqual(t[0], -2.0)
        self.assertEqual(t[-1], 6.0)

    def test_zoom(self):
        v = Viewport(-4.0, 4.0, -2.0, 2.0).zoom(0.5)
        self.assertEqual(v, Viewport(-2.0, 2.0, -1.0, 1.0))
        w = Viewport(0.0, 4.0, 0.0, 2.0).zoom(2.0, center=(0.0, 0.0))
        self.assertEqual(w, Viewport(0.0, 8.0, 0.0, 4.0))
        with self.assertRaises(ValueError):
            v.zoom(0.0)

    def test_pan(self):
        v = Viewport(-1.0, 1.0, -1.0, 1.0).pan(0.5, -1.0)
        self.assertEqual(v, Viewport(-0.5, 1.5, -2.0, 0.0))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Viewport(1.0, 1.0)
        with self.assertRaises(ValueError):
            Viewport(0.0, 1.0, 2.0, -2.0)


class TestSession(unittest.TestCase):

    def setUp(self):
        self.session = Session(Params(lengthscale=1.0, variance=1.5, noise=0.1))
        self.calls = []
        self.session.subscribe(lambda s: self.calls.append(s.error))

    def test_initial_prior(self):
        s = self.session
        self.assertEqual(s.xt.shape, (get_config().n_display_points,))
        self.assertTrue(gnp.all(s.posterior.mean == 0.0))
        self.assertTrue(gnp.all(s.posterior.variance == 1.5))
        self.assertIsNone(s.error)

    def test_add_point(self):
        s = self.session
        s.add_point(0.0, 1.0)
        self.assertEqual(s.observations, (Observation(0.0, 1.0),))
        self.assertEqual(len(self.calls), 1)
        i = int(gnp.argmin(gnp.abs(s.xt)))
        self.assertGreater(s.posterior.mean[i], 0.5)
        self.assertLess(s.posterior.variance[i], 0.5)

    def test_add_random_points(self):
        s = self.session
        s.add_random_points(4, rng=gnp.default_rng(0))
        self.assertEqual(len(s.observations), 4)
        for o in s.observations:
            self.assertTrue(s.viewport.xmin <= o.x <= s.viewport.xmax)
            self.assertTrue(s.viewport.ymin <= o.y <= s.viewport.ymax)

    def test_set_params(self):
        s = self.session
        s.set_params(lengthscale=100.0, noise=-1.0, kernel="matern32")
        self.assertEqual(s.params.lengthscale, s.bounds.lengthscale[1])
        self.assertEqual(s.params.noise, 0.0)
        self.assertIs(s.params.kernel, KernelId.MATERN32)
        with self.assertRaises(UnknownKernelError):
            s.set_params(kernel="spline")

    def test_keeps_previous_posterior(self):
        s = self.session
        s.set_params(noise=0.0, variance=1.0)
        s.add_point(0.5, 1.0)
        previous = s.posterior
        with self.assertLogs("gpexplorer", level="WARNING"):
            s.add_point(0.5, 2.0)
        self.assertIs(s.posterior, previous)
        self.assertEqual(s.error, POSTERIOR_UNDEFINED)
        self.assertEqual(self.calls[-1], POSTERIOR_UNDEFINED)
        self.assertEqual(len(s.observations), 2)

        # restoring some noise makes the posterior defined again
        s.set_params(noise=0.1)
        self.assertIsNone(s.error)
        self.assertIsNot(s.posterior, previous)

    def test_draw_sample(self):
        s = self.session
        rng = gnp.default_rng(1)
        sample = s.draw_sample(rng=rng)
        self.assertEqual(sample.x.shape, (get_config().n_sample_points,))
        self.assertEqual(sample.y.shape, (get_config().n_sample_points,))
        for _ in range(6):
            s.draw_sample(rng=rng)
        self.assertEqual(len(s.samples), get_config().max_samples)
        self.assertEqual(len(self.calls), 7)

    def test_draw_sample_failure(self):
        s = self.session
        s.set_params(noise=0.0, variance=1.0)
        s.add_point(0.5, 1.0)
        s.add_point(0.5, 2.0)
        with self.assertLogs("gpexplorer", level="WARNING"):
            self.assertIsNone(s.draw_sample())
        self.assertEqual(len(s.samples), 0)
        self.assertEqual(s.error, POSTERIOR_UNDEFINED)

    def test_clear_points(self):
        s = self.session
        s.add_point(0.0, 1.0)
        s.draw_sample()
        s.clear_points()
        self.assertEqual(s.observations, ())
        self.assertEqual(len(s.samples), 0)
        self.assertTrue(gnp.all(s.posterior.mean == 0.0))

    def test_clear_samples(self):
        s = self.session
        s.draw_sample()
        s.clear_samples()
        self.assertEqual(len(s.samples), 0)
        self.assertEqual(len(self.calls), 2)

    def test_set_viewport(self):
        s = self.session
        s.set_viewport(s.viewport.pan(10.0))
        self.assertEqual(s.xt[0], 5.0)
        self.assertEqual(s.xt[-1], 15.0)

    def test_unsubscribe(self):
        s = self.session
        callback = s.subscribe(lambda _: self.calls.append("second"))
        s.unsubscribe(callback)
        s.refresh()
        self.assertEqual(self.calls, [None])

    def test_custom_sizes(self):
        s = Session(n_display_points=50, n_sample_points=20, max_samples=2)
        self.assertEqual(s.xt.shape, (50,))
        self.assertEqual(s.draw_sample(rng=gnp.default_rng(0)).y.shape, (20,))
        self.assertEqual(s.samples.capacity, 2)


# ----------------------------------------------------------------------
# Run tests
# ----------------------------------------------------------------------
if __name__ == "__main__":
    unittest.main(verbosity=2)

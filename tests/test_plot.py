"""
Smoke tests for the plotting helpers (unittest version).
"""

import io
import unittest

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

import gpexplorer as gx
import gpexplorer.num as gnp
from gpexplorer.plot import Figure, render_session


class TestFigure(unittest.TestCase):

    def tearDown(self):
        plt.close("all")

    def test_plotgp_colorschemes(self):
        xt = gx.linspace(-1.0, 1.0, 20)
        mean = gnp.sin(xt)
        variance = gnp.full(20, 0.1)
        for scheme in ("simple", "default", "bw"):
            fig = Figure(isinteractive=False)
            fig.plotgp(xt, mean, variance, colorscheme=scheme)
            self.assertGreater(len(fig.ax.lines), 0)
            fig.close()
        with self.assertRaises(ValueError):
            Figure(isinteractive=False).plotgp(xt, mean, variance, colorscheme="neon")

    def test_plotsamples(self):
        fig = Figure(isinteractive=False)
        xs = gx.linspace(0.0, 1.0, 10)
        fig.plotsamples([gx.Sample(xs, xs), gx.Sample(xs, -xs)])
        self.assertEqual(len(fig.ax.lines), 2)
        labels = [line.get_label() for line in fig.ax.lines]
        self.assertEqual(labels[0], "samples")

    def test_lines_labels_and_savefig(self):
        fig = Figure(isinteractive=False)
        xs = gx.linspace(0.0, 1.0, 10)
        fig.plot(xs, xs**2, "k-", label="x^2")
        fig.xlabel("x")
        fig.ylabel("y")
        self.assertEqual(len(fig.ax.lines), 1)
        self.assertEqual(fig.ax.get_xlabel(), "x")
        self.assertEqual(fig.ax.get_ylabel(), "y")
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png")
        self.assertGreater(buffer.tell(), 0)
        fig.close()


class TestRenderSession(unittest.TestCase):

    def tearDown(self):
        plt.close("all")

    def test_render(self):
        session = gx.Session(n_display_points=40, n_sample_points=20)
        session.add_point(0.0, 1.0)
        session.draw_sample(rng=gnp.default_rng(0))
        fig = render_session(session)
        self.assertEqual(fig.xlim(), (session.viewport.xmin, session.viewport.xmax))
        self.assertEqual(fig.ylim(), (session.viewport.ymin, session.viewport.ymax))
        self.assertIn("rbf", fig.ax.get_title())

    def test_render_error(self):
        session = gx.Session(gx.Params(noise=0.0, variance=1.0), n_display_points=40)
        session.add_point(0.5, 1.0)
        session.add_point(0.5, 2.0)
        fig = render_session(session)
        self.assertEqual(fig.ax.get_title(), session.error)


if __name__ == "__main__":
    unittest.main(verbosity=2)

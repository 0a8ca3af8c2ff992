## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022, CentraleSupelec
# License: GPLv3
## --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Draws precomputed arrays (observations, posterior band, samples);
    nothing here calls the GP engine.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend and legend_fontsize is not None:
            self.legend(fontsize=legend_fontsize)
        elif legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def savefig(self, fname, **kwargs):
        self.fig.savefig(fname, **kwargs)

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xlabel(self, s):
        self.ax.set_xlabel(s)

    def ylabel(self, s):
        self.ax.set_ylabel(s)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        else:
            self.ax.set_xlim(new_limits)
            return new_limits

    def ylim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_ylim()
        else:
            self.ax.set_ylim(new_limits)
            return new_limits

    def plotgp(
        self,
        x,
        mean,
        variance,
        colorscheme="simple",
        mean_label="posterior mean",
        show_mean_label=True,
        ci=[0.95, 0.99, 0.999],  # CI levels
        ci_labels=["CI 95%", "CI 99%", "CI 99.9%"],
        show_ci_labels=True,
        **kwargs
    ):
        """Posterior mean and coverage intervals.

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        norminv (1 - 0.001/2) = 3.290527

        The "simple" scheme only draws the first (95%) band.
        """
        if not show_mean_label:
            mean_label = ""
        if not show_ci_labels:
            ci_labels = [""] * len(ci)

        mean = np.asarray(mean).flatten()
        x = np.asarray(x).flatten()
        std = np.sqrt(np.maximum(np.asarray(variance).flatten(), 0.0))

        delta0 = [stats.norm.ppf((1 + level) / 2) for level in ci]

        if colorscheme == "bw":
            mcol = "#000000"
            edgecol = "#000000"
            delta0 = [delta0[0]]
            ci_labels = [ci_labels[0]]
            fillcol = ["#F2F2F2"]
            alpha = 0.0
            drawulb = True
        elif colorscheme == "simple":
            mcol = "#F2404C"
            delta0 = [delta0[0]]
            ci_labels = [ci_labels[0]]
            fillcol = ["#BFBFBF"]
            alpha = 0.8
            kwargs["linewidth"] = 0.5
            drawulb = False
        elif colorscheme == "default":
            mcol = "#F2404C"
            delta0 = delta0[::-1]
            ci_labels = ci_labels[::-1]
            fillcol = ["#F2F2F2", "#D8D8D8", "#BFBFBF"]
            alpha = 0.8
            kwargs["linewidth"] = 0.5
            drawulb = False
        else:
            raise ValueError("colorscheme must be 'default', 'simple' or 'bw'")

        # mean
        self.ax.plot(x, mean, mcol, linewidth=2.0, label=mean_label)

        for i, delta in enumerate(delta0):
            kwargs["alpha"] = alpha

            lower = mean - delta * std
            upper = mean + delta * std

            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[i],
                label=ci_labels[i],
                **kwargs
            )

            if drawulb:
                for bound in (upper, lower):
                    self.ax.plot(
                        x,
                        bound,
                        color=edgecol,
                        linestyle="dashed",
                        dashes=(10, 8),
                        linewidth=0.5,
                    )

    def plotsamples(self, samples, label="samples", **kwargs):
        """Draw sample paths, each given as an (x, y) pair."""
        kwargs.setdefault("linewidth", 1)
        for i, (x, y) in enumerate(samples):
            self.ax.plot(
                x, y, "C{:d}".format(i % 10), label=label if i == 0 else None, **kwargs
            )


def render_session(session, fig=None):
    """Draw the current state of a `gpexplorer.session.Session`."""
    if fig is None:
        fig = Figure(isinteractive=False)
    v = session.viewport
    if session.posterior is not None:
        fig.plotgp(session.xt, session.posterior.mean, session.posterior.variance)
    if len(session.samples) > 0:
        fig.plotsamples(session.samples)
    if session.observations:
        x, y = zip(*session.observations)
        fig.plotdata(np.array(x), np.array(y))
    fig.xlim((v.xmin, v.xmax))
    fig.ylim((v.ymin, v.ymax))
    fig.xylabels("x", "y")
    if session.error is not None:
        fig.title(session.error)
    else:
        fig.title(
            "GP posterior ({}, lengthscale={:.2f}, variance={:.2f}, noise={:.2f})".format(
                session.params.kernel.value,
                session.params.lengthscale,
                session.params.variance,
                session.params.noise,
            )
        )
    return fig

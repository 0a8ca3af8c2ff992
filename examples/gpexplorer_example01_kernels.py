"""GP posterior with each kernel of the explorer

This script conditions a zero-mean GP on a few noisy observations and
displays the posterior mean and 95% coverage interval obtained with the
RBF and the three Matérn kernels.

Copyright (c) 2022-2026, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3

"""

import numpy as np
import gpexplorer as gx
from gpexplorer.plot import Figure


def generate_data():
    xi = np.array([-3.0, -1.5, 0.0, 0.5, 2.5])
    zi = np.sin(xi) + 0.1 * np.cos(3 * xi)
    observations = [gx.Observation(x, z) for x, z in zip(xi, zi)]
    xt = gx.linspace(-5.0, 5.0, gx.config.get_config().n_display_points)
    return observations, xt


def main():
    observations, xt = generate_data()

    posteriors = {}
    for kernel in gx.KernelId:
        params = gx.Params(lengthscale=1.0, variance=1.0, noise=0.1, kernel=kernel)
        model = gx.Model(params)
        posteriors[kernel] = model.predict(observations, xt)

    return observations, xt, posteriors


def visualization(observations, xt, posteriors):
    xi, zi = zip(*observations)
    fig = Figure(2, 2, isinteractive=True)
    for i, (kernel, posterior) in enumerate(posteriors.items()):
        fig.subplot(i + 1)
        fig.plotgp(xt, posterior.mean, posterior.variance)
        fig.plotdata(np.array(xi), np.array(zi))
        fig.title(kernel.value)
        fig.xlabel("x")
        fig.ylabel("z")
    fig.show()


if __name__ == "__main__":
    visualization(*main())

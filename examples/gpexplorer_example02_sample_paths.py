"""Prior and posterior sample paths in an explorer session

This script drives a `gpexplorer.Session` the way an interactive front
end would: it draws prior samples, adds observation points, changes the
kernel and the noise level, and keeps the last samples in the capped
history of the session.

Copyright (c) 2022-2026, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3

"""

import numpy as np
import gpexplorer as gx
from gpexplorer.plot import render_session


def main(seed=1234):
    rng = np.random.default_rng(seed)
    session = gx.Session(gx.Params(lengthscale=0.8, variance=1.0, noise=0.05))

    redraws = []
    session.subscribe(lambda s: redraws.append(s.error))

    # prior samples
    for _ in range(3):
        session.draw_sample(rng=rng)

    # posterior samples
    session.add_random_points(6, rng=rng)
    session.add_point(0.0, 1.0)
    session.set_params(kernel="matern52", noise=0.1)
    for _ in range(4):
        session.draw_sample(rng=rng)

    return session, redraws


if __name__ == "__main__":
    session, _ = main()
    fig = render_session(session)
    fig.show(grid=True, legend=True)

# gpexplorer/__init__.py

from . import config
from . import num
from . import kernel
from . import core
from . import session
from .core import (
    Model,
    Observation,
    Params,
    ParamBounds,
    Posterior,
    Sample,
    compute_posterior,
    posterior_covariance,
    sample_from_gp,
    sample_paths,
)
from .core.linalg import linspace
from .errors import NotPositiveDefiniteError, UnknownKernelError
from .kernel import KernelId, resolve_kernel
from .session import Session, SampleHistory, Viewport

__version__ = config.__version__

__all__ = [
    "num",
    "kernel",
    "core",
    "Model",
    "Observation",
    "Params",
    "ParamBounds",
    "Posterior",
    "Sample",
    "compute_posterior",
    "posterior_covariance",
    "sample_from_gp",
    "sample_paths",
    "linspace",
    "KernelId",
    "resolve_kernel",
    "NotPositiveDefiniteError",
    "UnknownKernelError",
    "Session",
    "SampleHistory",
    "Viewport",
    "__version__",
]

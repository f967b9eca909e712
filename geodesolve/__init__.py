
from geodesolve._version import __version__  # noqa: F401
from geodesolve.utils.logging import LOGGER, log_level
from geodesolve.errors import InvalidArgumentError
from geodesolve.geodesic import Geodesic, Solution, WGS84

__all__ = [
    'Geodesic',
    'InvalidArgumentError',
    'Solution',
    'WGS84',
    'LOGGER',
    'log_level',
]

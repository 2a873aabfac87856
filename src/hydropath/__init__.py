"""
hydropath - level paths, terminal basins and path lengths of river networks.

Main functions:
    get_levelpaths: partition a network into mainstem level paths
    get_path: single mainstem path upstream of a segment
    get_terminal: basin membership upstream of outlet segments
    get_pathlength: cumulative downstream length per segment
    get_sorted: topological order of a network
"""

__version__ = "0.1.0"

from .errors import (
    HydroPathError,
    ValidationError,
    FatalLoopError,
    FatalNonTerminationError,
    FatalGraphError,
)
from .nhd_network import get_sorted, get_tailwaters
from .mainstem import get_path
from .levelpaths import get_levelpaths, get_outlets
from .terminal import get_terminal
from .pathlength import get_pathlength

__all__ = [
    "HydroPathError",
    "ValidationError",
    "FatalLoopError",
    "FatalNonTerminationError",
    "FatalGraphError",
    "get_sorted",
    "get_tailwaters",
    "get_path",
    "get_levelpaths",
    "get_outlets",
    "get_terminal",
    "get_pathlength",
]

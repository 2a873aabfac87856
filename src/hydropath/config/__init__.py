from .config import Config
from .compute_parameters import ComputeParameters
from .logging_parameters import LoggingParameters
from .network_parameters import Columns, NetworkParameters
from .output_parameters import OutputParameters

__all__ = [
    "Config",
    "ComputeParameters",
    "LoggingParameters",
    "Columns",
    "NetworkParameters",
    "OutputParameters",
]

from pydantic import BaseModel, Field

from .logging_parameters import LoggingParameters
from .network_parameters import NetworkParameters
from .compute_parameters import ComputeParameters
from .output_parameters import OutputParameters


class Config(BaseModel, extra='forbid'):
    log_parameters: LoggingParameters = Field(default_factory=LoggingParameters)
    network_parameters: NetworkParameters
    compute_parameters: ComputeParameters = Field(default_factory=ComputeParameters)
    output_parameters: OutputParameters = Field(default_factory=OutputParameters)

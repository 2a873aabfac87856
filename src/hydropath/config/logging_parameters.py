from pydantic import BaseModel

from typing_extensions import Literal

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class LoggingParameters(BaseModel, extra='forbid'):
    log_level: LogLevel = "DEBUG"
    """
    Python logging level. Can either be a string or an integer from the list below optional,
    defaults to DEBUG (10). All logging statements at or above the level specified will be
    displayed.
    """
    showtiming: bool = False
    """
    logical, if True a timing summary is provided that reports the total time required for each
    computation. optional, defaults to False and no timing summary is reported
    """

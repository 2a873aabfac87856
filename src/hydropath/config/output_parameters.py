from pathlib import Path

from pydantic import BaseModel, Field, root_validator

from typing_extensions import Literal

OutputFormat = Literal["csv", "parquet"]


class OutputParameters(BaseModel, extra='forbid'):
    """
    Parameters controlling which tables are written and where.
    """
    output_folder: Path = Field(default_factory=Path.cwd)
    """
    Directory the output tables are written to.
    """
    levelpaths: bool = True
    """
    If True write levelpaths.<format> with ID, outletID, topo_sort and levelpath columns.
    """
    terminals: bool = False
    """
    If True write terminals.<format> with terminalID and ID columns.
    """
    pathlength: bool = False
    """
    If True write pathlength.<format> with ID and pathlength columns.
    """
    output_format: OutputFormat = "csv"

    @root_validator(skip_on_failure=True)
    def check_some_output(cls, values):
        assert (
            values.get("levelpaths") or values.get("terminals") or values.get("pathlength")
        ), "At least one of levelpaths, terminals or pathlength output must be enabled."
        return values

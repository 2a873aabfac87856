from pydantic import BaseModel, Field

from typing import List, Optional, Union
from typing_extensions import Literal

LookupBackend = Literal["auto", "dict", "frame"]


class ComputeParameters(BaseModel, extra='forbid'):
    """
    Parameters controlling the level path, basin and path length computations.
    """
    override_factor: Optional[float] = Field(None, gt=0)
    """
    If the weight of an upstream segment is override_factor times larger than the weight along
    the named path, it is followed regardless of nameID. optional, defaults to None and names
    always win.
    """
    status: bool = False
    """
    If True progress of long running level path assignments is logged.
    """
    lookup_backend: LookupBackend = "auto"
    """
    Structure used to find the inflows of a segment while walking mainstems.
    - "auto": fastest available structure
    - "dict": hashed inflow lists
    - "frame": pandas frame indexed by toID
    """
    max_iterations: int = Field(10000000, gt=0)
    """
    Maximum number of level paths walked before the assignment is aborted.
    """
    cpu_pool: int = Field(1, ge=1)
    """
    Number of CPUs used for the basin searches
    """
    outlets: Optional[List[Union[int, float]]] = None
    """
    Outlet segments basins are resolved for. optional, defaults to all network tailwaters.
    """

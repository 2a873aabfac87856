from pathlib import Path

from pydantic import BaseModel, Field

from typing import Optional


class Columns(BaseModel, extra='forbid'):
    """
    Attribute names in the segment table. Each field is the name of the source column
    holding that attribute.
    """
    ID: str = "ID"
    """
    unique segment identifier
    """
    toID: str = "toID"
    """
    identifier of the downstream segment, terminal_code or null at outlets
    """
    nameID: str = "nameID"
    """
    name grouping identifier, e.g. GNIS_ID. Blank, null and "-1" mean unnamed.
    """
    weight: str = "weight"
    """
    magnitude followed at unnamed confluences, e.g. arbolate sum
    """
    length: str = "length"
    """
    segment length
    """


class NetworkParameters(BaseModel, extra='forbid'):
    """
    Parameters specific to the segment table.
    """
    geo_file_path: Path
    """
    Path to the segment table. Accepts csv (optionally zipped), parquet, netcdf and
    geopackage (attribute table only).
    """
    layer_string: Optional[str] = None
    """
    Geopackage layer or member of a zipped csv holding the segment table.
    """
    columns: Columns = Field(default_factory=Columns)
    """
    Attribute names in the segment table.
    """
    terminal_code: int = 0
    """
    Coding in the segment table for segments draining to the ocean. A '0' ID indicates there
    is nothing downstream.
    """

import zipfile
import pathlib
import logging

import geopandas as gpd
import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
import xarray as xr

LOG = logging.getLogger('')

SEGMENT_COLUMNS = ["ID", "toID", "nameID", "weight", "length"]


def read_netcdf(geo_file_path):
    '''
    Open a netcdf file with xarray and convert to dataframe

    Arguments
    ---------
    geo_file_path (str or pathlib.Path): netCDF filepath

    Returns
    -------
    ds.to_dataframe() (DataFrame): netCDF contents

    Notes
    -----
    - When handling large volumes of netCDF files, xarray is not the most efficient.

    '''
    with xr.open_dataset(geo_file_path) as ds:
        return ds.to_dataframe().reset_index(drop=True)


def read_csv(geo_file_path, header="infer", layer_string=None):
    if geo_file_path.suffix == ".zip":
        if layer_string is None:
            raise ValueError("layer_string is needed if reading from compressed csv")
        with zipfile.ZipFile(geo_file_path, "r") as zcsv:
            with zcsv.open(layer_string) as csv:
                return pd.read_csv(csv, header=header)
    else:
        return pd.read_csv(geo_file_path, header=header)


def read_parquet(geo_file_path):
    return pq.read_table(geo_file_path).to_pandas()


def read_geopkg(geo_file_path, layer_string=None):
    '''
    Read the attribute table of a geopackage layer. Geometry is dropped.
    '''
    gdf = gpd.read_file(geo_file_path, layer=layer_string)
    return pd.DataFrame(gdf.drop(columns=gdf.geometry.name))


def read(geo_file_path, layer_string=None):
    '''
    Read a segment table, dispatching on the file suffix.

    Arguments
    ---------
    geo_file_path (str or pathlib.Path): segment table path
    layer_string                  (str): geopackage layer or zipped csv member

    Returns
    -------
    (DataFrame): raw segment table
    '''
    geo_file_path = pathlib.Path(geo_file_path)
    suffix = geo_file_path.suffix
    LOG.info("reading segment table %s ...", geo_file_path)
    if suffix in (".csv", ".zip"):
        return read_csv(geo_file_path, layer_string=layer_string)
    elif suffix == ".parquet":
        return read_parquet(geo_file_path)
    elif suffix == ".nc":
        return read_netcdf(geo_file_path)
    elif suffix == ".gpkg":
        return read_geopkg(geo_file_path, layer_string)
    else:
        raise RuntimeError(
            "Cannot read file {}. Unsupported file type {}.".format(geo_file_path, suffix)
        )


def rename_columns(df, columns):
    '''
    Rename source attribute columns to the segment table schema.

    Arguments
    ---------
    df (DataFrame): raw segment table
    columns (dict): {schema name: source column name}

    Returns
    -------
    (DataFrame): table holding the schema columns present in df
    '''
    crosswalk = {v: k for k, v in columns.items() if v in df.columns}
    df = df.rename(columns=crosswalk)
    return df.loc[:, [c for c in SEGMENT_COLUMNS if c in df.columns]]


def write(df, output_path, output_format="csv"):
    '''
    Write a result table.

    Arguments
    ---------
    df           (DataFrame): table to write
    output_path (pathlib.Path): destination, without suffix
    output_format      (str): "csv" or "parquet"

    Returns
    -------
    (pathlib.Path): path written
    '''
    output_path = pathlib.Path(output_path).with_suffix("." + output_format)
    if output_format == "csv":
        df.to_csv(output_path, index=False)
    elif output_format == "parquet":
        pq.write_table(pa.Table.from_pandas(df, preserve_index=False), output_path)
    else:
        raise RuntimeError("Unsupported output format {}.".format(output_format))
    LOG.debug("wrote %s rows to %s", len(df), output_path)
    return output_path

from setuptools import setup, find_packages

"""
Level paths, terminal basins and path lengths of river networks.
The computations only need pandas and numpy; the reader/writer glue used by
`python -m hydropath` also needs pyarrow, xarray and geopandas.
"""

setup(
    name="hydropath",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "joblib",
        "pydantic>=1.10,<2.0",
        "pyyaml",
        "typing_extensions",
        "pyarrow",
        "xarray",
        "netCDF4",
        "geopandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

import logging
import time

import numpy as np
import pandas as pd

from .errors import FatalNonTerminationError
from .mainstem import (
    STATUS_INTERVAL,
    build_inflow_index,
    check_override_factor,
    resolve_backend,
    walk_mainstem,
)
from .network_utilities import prepare_levelpath_input
from .nhd_network import get_sorted

LOG = logging.getLogger('')

MAX_ITERATIONS = 10000000


def get_outlets(x):
    '''
    Outlet of every level path.

    Arguments
    ---------
    x (DataFrame): table with ID, topo_sort and levelpath columns

    Returns
    -------
    (DataFrame): outletID and levelpath columns, one row per level path.
                 The outlet is the member with the smallest topo_sort.
    '''
    if x.empty:
        return pd.DataFrame(
            {
                "outletID": pd.Series(dtype=x["ID"].dtype),
                "levelpath": pd.Series(dtype=x["levelpath"].dtype),
            }
        )

    idx = x.groupby("levelpath")["topo_sort"].idxmin()
    return (
        x.loc[idx, ["ID", "levelpath"]]
        .rename(columns={"ID": "outletID"})
        .reset_index(drop=True)
    )


def get_levelpaths(
    x,
    override_factor=None,
    status=False,
    backend="auto",
    max_iterations=MAX_ITERATIONS,
    terminal_code=0,
):
    '''
    Calculate level paths using the stream-leveling approach of NHDPlus.

    Starting from the most downstream unassigned segment, the mainstem is
    walked upstream following the nameID or, where no nameID decides, the
    largest weight. Every segment on the walk gets the topo_sort of the
    starting segment as its level path identifier. This is repeated until
    all segments are assigned.

    Arguments
    ---------
    x           (DataFrame): segments with ID, toID, nameID and weight columns.
                             If arbolate sum is used as weight this matches
                             the behavior of NHDPlus.
    override_factor (float): follow weight if it is this many times larger
                             than the weight along the named path
    status           (bool): log progress
    backend           (str): inflow lookup structure, see mainstem.resolve_backend
    max_iterations    (int): cap on the number of level paths walked
    terminal_code     (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (DataFrame): ID, outletID, topo_sort and levelpath columns, upstream
                 segments first.

    Notes
    -----
    - topo_sort is similar to Hydroseq in NHDPlus: large topo_sort values are
      upstream of small ones. There are many valid topological orders of a
      network, only the level path partition is stable between them.
    - Segments whose toID is not a segment of x are treated as outlets.
    '''
    check_override_factor(override_factor)
    x = prepare_levelpath_input(x, terminal_code)
    backend = resolve_backend(backend)

    start_time = time.time()
    LOG.info("sorting %s segments ...", len(x))
    sorted_ids = get_sorted(x, terminal_code)

    x = x.set_index("ID").loc[sorted_ids].reset_index()
    total = len(x)
    x["topo_sort"] = np.arange(total, 0, -1)

    index = build_inflow_index(x, backend)
    rank = dict(zip(x["ID"], x["topo_sort"]))

    LOG.info("assigning level paths with the %s backend ...", backend)
    levelpath = {}
    checker = 0
    # most downstream segments first
    for tail in reversed(sorted_ids):
        if tail in levelpath:
            continue

        if checker >= max_iterations:
            raise FatalNonTerminationError(total - len(levelpath), total)

        path_ids = walk_mainstem(index, tail, override_factor, status, levelpath)
        tail_rank = rank[tail]
        for i in path_ids:
            levelpath[i] = tail_rank
        checker += 1

        if status and checker % STATUS_INTERVAL == 0:
            LOG.info("%s of %s remaining.", total - len(levelpath), total)

    x["levelpath"] = x["ID"].map(levelpath).astype(x["topo_sort"].dtype)

    outlets = get_outlets(x)
    x = x.merge(outlets, on="levelpath", how="left")

    LOG.debug(
        "level path assignment complete in %s seconds." % (time.time() - start_time)
    )
    return x.loc[:, ["ID", "outletID", "topo_sort", "levelpath"]]

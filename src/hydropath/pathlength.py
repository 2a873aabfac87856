import logging

import pandas as pd

from .network_utilities import check_names, fill_terminal
from .nhd_network import get_sorted

LOG = logging.getLogger('')


def get_pathlength(x, terminal_code=0):
    '''
    Main path length from every flowline to its basin's terminal.

    Arguments
    ---------
    x (DataFrame): segments with ID, toID and length columns
    terminal_code (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (DataFrame): ID and pathlength columns, downstream segments first.
                 pathlength is the summed length of all segments strictly
                 downstream; segments draining to the terminal get 0.
    '''
    x = check_names(x, "get_pathlength")
    x["toID"] = fill_terminal(x["toID"], terminal_code, x["ID"].dtype)

    # downstream segments first, so every toID is resolved before its inflows
    sorted_ids = get_sorted(x, terminal_code)[::-1]
    x = x.set_index("ID").loc[sorted_ids]
    LOG.info("accumulating path length of %s segments ...", len(x))

    le = dict(zip(x.index, x["length"]))
    leo = {}
    for i, tid in zip(x.index, x["toID"]):
        if tid != terminal_code and tid in leo:
            leo[i] = le[tid] + leo[tid]
        else:
            leo[i] = 0

    return pd.DataFrame(
        {
            "ID": x.index.values,
            "pathlength": pd.Series([leo[i] for i in x.index], dtype="float64").values,
        }
    )

import logging
import time

import pandas as pd
from joblib import delayed, Parallel

from .network_utilities import check_names
from .nhd_network import reachable, reverse_network, segment_connections

LOG = logging.getLogger('')


def get_terminal(x, outlets, cpu_pool=1, terminal_code=0):
    '''
    Get the ID of the basin outlet for each flowline.

    Arguments
    ---------
    x       (DataFrame): segments with ID and toID columns
    outlets  (iterable): IDs of outlet flowlines
    cpu_pool      (int): number of worker processes used for the
                         per-outlet upstream searches
    terminal_code (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (DataFrame): terminalID and ID columns, one row for every segment
                 upstream of (and including) each outlet. ID has the dtype
                 of the input ID column.

    Notes
    -----
    - Basins upstream of distinct outlets are expected to be disjoint. A
      segment reachable from more than one outlet is reported once for each
      of them; only exact (terminalID, ID) duplicates are dropped.
    - Outlets that are not segments of x produce no rows.
    '''
    x = check_names(x, "get_terminal")
    rconn = reverse_network(segment_connections(x, terminal_code))

    outlets = list(outlets)
    sources = list(dict.fromkeys(o for o in outlets if o in rconn))
    missing = len(set(outlets)) - len(sources)
    if missing:
        LOG.warning("%s outlets are not part of the network and are ignored.", missing)

    start_time = time.time()
    LOG.info("searching %s basins upstream of outlets ...", len(sources))
    if cpu_pool > 1 and len(sources) > 1:
        batches = [sources[i::cpu_pool] for i in range(cpu_pool)]
        with Parallel(n_jobs=cpu_pool) as parallel:
            jobs = []
            for batch in batches:
                if batch:
                    jobs.append(delayed(reachable)(rconn, batch))
            results = parallel(jobs)
        basins = {}
        for r in results:
            basins.update(r)
    else:
        basins = reachable(rconn, sources)
    LOG.debug("basin search complete in %s seconds." % (time.time() - start_time))

    records = [(o, i) for o in outlets if o in basins for i in basins[o]]
    basin_df = pd.DataFrame(records, columns=["terminalID", "ID"]).drop_duplicates(
        ignore_index=True
    )

    id_dtype = x["ID"].dtype
    basin_df["ID"] = basin_df["ID"].astype(id_dtype)
    if basin_df.empty:
        basin_df["terminalID"] = basin_df["terminalID"].astype(id_dtype)

    return basin_df

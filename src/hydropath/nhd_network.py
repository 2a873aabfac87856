from collections import defaultdict, Counter, deque
from itertools import chain

from .errors import FatalGraphError
from .network_utilities import check_names, fill_terminal


def extract_connections(rows, target_col, terminal_codes=None):
    '''
    Extract connection network from dataframe.

    Arguments:
    ----------
    rows (DataFrame): Dataframe indexed by segment id.
    target_col (str): Target of edge
    terminal_codes (iterable): downstream codes meaning "nothing downstream"

    Returns:
    --------
    network (dict, int: [int]): {segment id: [list of downstream adjacent segment ids]}

    '''
    if terminal_codes is not None:
        terminal_codes = set(terminal_codes)
    else:
        terminal_codes = {0}

    network = {}
    for src, dst in rows[target_col].items():
        if src not in network:
            network[src] = []

        if dst not in terminal_codes:
            network[src].append(dst)
    return network


def segment_connections(x, terminal_code=0):
    '''
    Downstream connections of a segment table.

    Null toIDs and toIDs that do not refer to a segment in the table
    (off-network outlets) are both treated as terminal.

    Arguments
    ---------
    x (DataFrame): segment table with ID and toID columns
    terminal_code (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (dict, int: [int]): downstream connections
    '''
    rows = x.set_index("ID")
    rows["toID"] = fill_terminal(rows["toID"], terminal_code, x["ID"].dtype)
    terminal_codes = {terminal_code} | set(
        rows.loc[~rows["toID"].isin(rows.index), "toID"].values
    )
    return extract_connections(rows, "toID", terminal_codes)


def reverse_network(N):
    '''
    Reverse network connections graph

    Arguments:
    ----------
    N (dict, int: [int]): downstream network connections

    Returns:
    --------
    rg (dict, int: [int]): upstream network connections

    '''
    rg = defaultdict(list)
    for src, dst in N.items():
        rg[src]
        for n in dst:
            rg[n].append(src)
    rg.default_factory = None
    return rg


def headwaters(N):
    '''
    Find network headwater segments

    Arguments
    ---------
    N (dict, int: [int]): Network connections graph

    Returns
    -------
    (iterable): headwater segments

    Notes
    -----
    - If reverse connections graph is handed as input, then function
      will return network tailwaters.

    '''
    return N.keys() - chain.from_iterable(N.values())


def tailwaters(N):
    '''
    Find network tailwaters

    Arguments
    ---------
    N (dict, int: [int]): Network connections graph

    Returns
    -------
    (iterable): tailwater segments

    Notes
    -----
    - If reverse connections graph is handed as input, then function
      will return network headwaters.

    '''
    tw = chain.from_iterable(N.values()) - N.keys()
    for m, n in N.items():
        if not n:
            tw.add(m)
    return tw


def in_degrees(N):
    """
    Compute indegree of nodes in N.

    Args:
        N (dict): Network

    Returns:
        (Counter): {node: number of edges pointing at node}
    """
    degs = Counter(chain.from_iterable(N.values()))
    degs.update(dict.fromkeys(headwaters(N), 0))
    return degs


def reachable(N, sources=None, targets=None):
    """
    Return segments reachable from sources.

    Arguments:
    ----------
    N (dict, int: [int]): Reverse network connections
    sources (iterable): Segments from which to start searches.
                        If none, network tailwaters are used
    targets (iterable): Target segments to stop searching.

    Returns:
    rv (dict, int: list(int)): Segments reachable from sources, in breadth
                               first order. Sources are dictionary keys,
                               reachable segments are dictionary values.

    """
    if sources is None:
        sources = headwaters(N)

    targets = set(targets) if targets is not None else set()

    rv = {}
    for h in sources:
        reach = {}
        Q = deque([h])
        while Q:
            x = Q.popleft()
            if x in reach:
                continue
            reach[x] = None
            if x not in targets:
                Q.extend(N.get(x, ()))
        rv[h] = list(reach)
    return rv


def reachable_network(N, sources=None, targets=None, check_disjoint=True):
    """
    Return subnetworks generated by reach

    Arguments:
    ----------
    N (dict, int: [int]): Reverse network connections
    sources (iterable): Segments to begin search from. If None, network
                        tailwaters are used
    targets (iterable): Target segments to stop searching
    check_disjoint (bool): raise if two sources reach a common segment

    Returns:
    --------
    rv (dict, {int, {int: [int]}}): Reverse connections for each independent
                                    network, keyed by its source id.

    Raises:
    -------
    ValueError if check_disjoint and the subnetworks overlap
    """
    reached = reachable(N, sources=sources, targets=targets)

    if check_disjoint and len(reached) > 1:
        seen = set()
        for members in reached.values():
            if not seen.isdisjoint(members):
                raise ValueError("Networks not disjoint")
            seen.update(members)

    rv = {}
    for k, n in reached.items():
        rv[k] = {m: N.get(m, []) for m in n}
    return rv


def kahn_toposort(N):
    '''
    Topological sort of a connections graph.

    Every node is yielded before the nodes it points to. For a downstream
    connections graph that means upstream segments come first.

    Raises
    ------
    FatalGraphError if the graph contains a cycle
    '''
    degrees = in_degrees(N)
    zero_degree = set(k for k, v in degrees.items() if v == 0)

    _deg_pop = zero_degree.pop
    _deg_add = zero_degree.add
    _network_get = N.get
    while zero_degree:
        n = _deg_pop()
        for j in _network_get(n, ()):
            degrees[j] = c = degrees[j] - 1
            if c == 0:
                _deg_add(j)
        yield n

    cycle = [k for k, v in degrees.items() if v > 0]
    if cycle:
        raise FatalGraphError(
            "Cycle exists! {} segments could not be sorted, e.g. {}".format(
                len(cycle), cycle[:5]
            )
        )


def get_sorted(x, terminal_code=0):
    '''
    Topological order of the segments in x, upstream segments first.

    Arguments
    ---------
    x (DataFrame): segment table with ID and toID columns
    terminal_code (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (list): segment IDs. Terminal codes and off-network ids are excluded.
    '''
    x = check_names(x, "get_sorted")
    connections = segment_connections(x, terminal_code)
    return list(kahn_toposort(connections))


def get_tailwaters(x, terminal_code=0):
    '''
    Segments draining to the terminal code or to an id outside of x.

    These are the natural outlets to hand to the terminal basin resolver.

    Arguments
    ---------
    x (DataFrame): segment table with ID and toID columns
    terminal_code (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (list): outlet segment IDs in input order
    '''
    x = check_names(x, "get_tailwaters")
    tw = tailwaters(segment_connections(x, terminal_code))
    return [i for i in x["ID"].tolist() if i in tw]

from abc import ABC, abstractmethod
from collections import defaultdict, namedtuple
import logging

from .errors import FatalLoopError
from .network_utilities import BLANK_NAME, prepare_levelpath_input

LOG = logging.getLogger('')

Candidate = namedtuple("Candidate", ["ID", "nameID", "weight"])

BACKENDS = ("dict", "frame")

# Progress messages for long mainstems are emitted every STATUS_INTERVAL steps
STATUS_INTERVAL = 1000


def resolve_backend(backend="auto"):
    '''
    Resolve the inflow lookup structure used for mainstem walking.

    Arguments
    ---------
    backend (str): one of "auto", "dict" or "frame"

    Returns
    -------
    (str): concrete backend name

    Notes
    -----
    "auto" resolves to "dict": hashed inflow lists are the fastest lookup
    available in every environment. "frame" keeps the inflows in a pandas
    frame indexed by toID. Both produce identical paths.
    '''
    if backend == "auto":
        return "dict"
    if backend not in BACKENDS:
        raise ValueError(
            "Unknown lookup backend {}. Expected one of {}.".format(
                backend, ", ".join(("auto",) + BACKENDS)
            )
        )
    return backend


class InflowIndex(ABC):
    """
    Lookup of the segments draining directly into a given segment.

    Candidates are always returned in ascending ID order.
    """

    @abstractmethod
    def inflows(self, node):
        """List of Candidate records whose toID is node."""

    @abstractmethod
    def name(self, node):
        """nameID of node."""

    @abstractmethod
    def __contains__(self, node):
        pass


class DictInflowIndex(InflowIndex):
    __slots__ = ["_inflows", "_names"]

    def __init__(self, x):
        frame = x.sort_values("ID", kind="stable")

        self._inflows = defaultdict(list)
        self._names = {}
        for i, to, name, weight in frame[["ID", "toID", "nameID", "weight"]].itertuples(
            index=False, name=None
        ):
            self._inflows[to].append(Candidate(i, name, weight))
            self._names.setdefault(i, name)
        self._inflows.default_factory = None

    def inflows(self, node):
        return self._inflows.get(node, [])

    def name(self, node):
        return self._names.get(node, BLANK_NAME)

    def __contains__(self, node):
        return node in self._names


class FrameInflowIndex(InflowIndex):
    __slots__ = ["_by_toid", "_names"]

    def __init__(self, x):
        frame = x.sort_values("ID", kind="stable")

        self._by_toid = (
            frame.loc[:, ["toID", "ID", "nameID", "weight"]]
            .set_index("toID")
            .sort_index(kind="stable")
        )
        names = frame.set_index("ID")["nameID"]
        self._names = names[~names.index.duplicated()]

    def inflows(self, node):
        try:
            rows = self._by_toid.loc[[node]]
        except KeyError:
            return []
        return [Candidate._make(r) for r in rows.itertuples(index=False, name=None)]

    def name(self, node):
        return self._names.get(node, BLANK_NAME)

    def __contains__(self, node):
        return node in self._names.index


def build_inflow_index(x, backend="dict"):
    '''
    Build the inflow lookup for a normalized segment table.

    Arguments
    ---------
    x (DataFrame): output of prepare_levelpath_input
    backend (str): "dict" or "frame", see resolve_backend

    Returns
    -------
    (InflowIndex)
    '''
    if backend == "dict":
        return DictInflowIndex(x)
    elif backend == "frame":
        return FrameInflowIndex(x)
    raise ValueError("Unknown lookup backend {}.".format(backend))


def get_next_tail(candidates, cur_name, override_factor=None):
    '''
    Choose the dominant upstream segment at a confluence.

    Named candidates are preferred over unnamed ones and a candidate that
    continues the current segment's name is preferred over other named
    ones. If override_factor is given and the heaviest candidate outweighs
    the chosen one by more than that factor, the heaviest one is followed
    instead. Remaining ties go to the largest weight, then to the smallest ID.

    Arguments
    ---------
    candidates (list of Candidate): inflows, ascending ID order
    cur_name                 (str): nameID of the current segment
    override_factor        (float): follow weight if this many times larger

    Returns
    -------
    (list of Candidate): at most one candidate
    '''
    max_weight = max(c.weight for c in candidates)

    named = [c for c in candidates if c.nameID != BLANK_NAME]
    if named:
        pick = named

        if cur_name != BLANK_NAME:
            matched = [c for c in pick if c.nameID == cur_name]
            if matched:
                pick = matched

        if override_factor is not None:
            if any((max_weight / override_factor) > c.weight for c in pick):
                pick = [c for c in candidates if c.weight == max_weight]

        candidates = pick

    if len(candidates) > 1:
        top = max(c.weight for c in candidates)
        candidates = [c for c in candidates if c.weight == top]

    return candidates[:1]


def walk_mainstem(index, tail_id, override_factor=None, status=False, assigned=None):
    '''
    Walk upstream from tail_id following one inflow per confluence.

    Arguments
    ---------
    index    (InflowIndex): inflow lookup of the network
    tail_id              : most downstream segment of the path
    override_factor (float): see get_next_tail
    status          (bool): log progress on long mainstems
    assigned   (container): segments already on another level path. They
                            are never followed.

    Returns
    -------
    (list): segment IDs from tail_id upstream

    Raises
    ------
    FatalLoopError if a segment is reached twice
    '''
    if tail_id not in index:
        LOG.warning("Segment %s is not part of the network, no path returned.", tail_id)
        return []

    path = []
    visited = set()
    tail = tail_id
    while tail is not None:
        if tail in visited:
            raise FatalLoopError(tail)
        visited.add(tail)
        path.append(tail)

        if status and len(path) % STATUS_INTERVAL == 0:
            LOG.info("long mainstem %s", len(path))

        candidates = index.inflows(tail)
        if assigned:
            candidates = [c for c in candidates if c.ID not in assigned]

        if len(candidates) > 1:
            candidates = get_next_tail(candidates, index.name(tail), override_factor)

        tail = candidates[0].ID if candidates else None

    return path


def check_override_factor(override_factor):
    if override_factor is not None and not override_factor > 0:
        raise ValueError(
            "override_factor must be a positive number, got {}".format(override_factor)
        )


def get_path(x, tail_id, override_factor=None, status=False, backend="auto", terminal_code=0):
    '''
    Single mainstem path upstream of a segment.

    Arguments
    ---------
    x           (DataFrame): segments with ID, toID, nameID and weight columns
    tail_id                : ID of the segment to start from
    override_factor (float): follow weight if it is this many times larger
                             than the weight along the named path
    status           (bool): log progress on long mainstems
    backend           (str): inflow lookup structure, see resolve_backend
    terminal_code     (int): downstream code meaning "nothing downstream"

    Returns
    -------
    (list): segment IDs from tail_id upstream
    '''
    check_override_factor(override_factor)
    x = prepare_levelpath_input(x, terminal_code)
    index = build_inflow_index(x, resolve_backend(backend))
    return walk_mainstem(index, tail_id, override_factor, status)

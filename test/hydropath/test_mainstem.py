import pandas as pd
import pytest
from hydropath.errors import FatalLoopError, ValidationError
from hydropath.mainstem import (
    Candidate,
    build_inflow_index,
    get_next_tail,
    get_path,
    resolve_backend,
)
from hydropath.network_utilities import BLANK_NAME, prepare_levelpath_input

BACKENDS = ["dict", "frame"]


@pytest.mark.parametrize("backend", BACKENDS)
def test_name_match_dominates_weight(confluence_network, backend):
    assert get_path(confluence_network, 1, backend=backend) == [1, 2]


@pytest.mark.parametrize("backend", BACKENDS)
def test_override_factor(confluence_network, backend):
    # 50 / 2 = 25 > 10, so the heavier tributary is followed
    assert get_path(confluence_network, 1, override_factor=2, backend=backend) == [1, 3]
    # 50 / 10 = 5 < 10, the name match stands
    assert get_path(confluence_network, 1, override_factor=10, backend=backend) == [1, 2]


@pytest.mark.parametrize("backend", BACKENDS)
def test_walker_mainstem(walker_network, backend):
    assert get_path(walker_network, 1, backend=backend) == [1, 2, 4, 8]
    assert get_path(walker_network, 3, backend=backend) == [3, 6]
    assert get_path(walker_network, 10, backend=backend) == [10, 11]
    assert get_path(walker_network, 12, backend=backend) == [12]


@pytest.mark.parametrize("backend", BACKENDS)
def test_tie_goes_to_smallest_id(backend):
    x = pd.DataFrame(
        {
            "ID": [1, 5, 4],
            "toID": [0, 1, 1],
            "nameID": ["", "", ""],
            "weight": [3.0, 1.0, 1.0],
        }
    )
    assert get_path(x, 1, backend=backend) == [1, 4]
    # independent of row order
    assert get_path(x.iloc[::-1], 1, backend=backend) == [1, 4]


@pytest.mark.parametrize("backend", BACKENDS)
def test_loop_detected(cycle_network, backend):
    with pytest.raises(FatalLoopError) as e:
        get_path(cycle_network, 1, backend=backend)
    assert e.value.node == 1


def test_unknown_tail(walker_network):
    assert get_path(walker_network, 999) == []


def test_missing_columns(walker_network):
    with pytest.raises(ValidationError) as e:
        get_path(walker_network.drop(columns=["weight"]), 1)
    assert e.value.missing == ["weight"]


@pytest.mark.parametrize("factor", [0, -1])
def test_bad_override_factor(confluence_network, factor):
    with pytest.raises(ValueError):
        get_path(confluence_network, 1, override_factor=factor)


def test_resolve_backend():
    assert resolve_backend("auto") == "dict"
    assert resolve_backend("frame") == "frame"
    with pytest.raises(ValueError):
        resolve_backend("data.table")


@pytest.mark.parametrize(
    "candidates,cur_name,override_factor,expected",
    [
        # only one named candidate
        ([Candidate(1, "", 9.0), Candidate(2, "X", 1.0)], "Y", None, 2),
        # name match among several named candidates
        ([Candidate(1, "X", 9.0), Candidate(2, "Y", 1.0)], "Y", None, 2),
        # several named, none matching: heaviest named one
        ([Candidate(1, "X", 2.0), Candidate(2, "Y", 3.0), Candidate(3, "", 9.0)], "Z", None, 2),
        # unnamed current segment never matches
        ([Candidate(1, "X", 2.0), Candidate(2, "", 3.0)], BLANK_NAME, None, 1),
        # override towards the unnamed heavy candidate
        ([Candidate(1, "X", 2.0), Candidate(2, "", 9.0)], "X", 4, 2),
        # nothing named: heaviest
        ([Candidate(1, "", 2.0), Candidate(2, "", 9.0)], BLANK_NAME, None, 2),
    ],
)
def test_get_next_tail(candidates, cur_name, override_factor, expected):
    (pick,) = get_next_tail(candidates, cur_name, override_factor)
    assert pick.ID == expected


def test_index_backends_agree(random_network):
    x = prepare_levelpath_input(random_network)
    dict_index = build_inflow_index(x, "dict")
    frame_index = build_inflow_index(x, "frame")
    for node in list(x["ID"]) + [0]:
        assert dict_index.inflows(node) == frame_index.inflows(node)
    for node in x["ID"]:
        assert dict_index.name(node) == frame_index.name(node)
        assert node in dict_index and node in frame_index

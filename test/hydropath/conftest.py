from typing import Dict, List

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def network_clean() -> List[List[int]]:
    """
    Provides a clean network configuration for testing.

    Each sublist represents a network node with format:
    [node_id, length, downstream_id]

    Returns
    -------
    List[List[int]]
        List of network nodes where each node contains:
        - Index 0: Node ID
        - Index 1: Length value
        - Index 2: Downstream node ID (-999 for terminal nodes)
    """
    return [
        [0, 456, -999],
        [1, 178, 4],
        [2, 394, 0],
        [3, 301, 2],
        [4, 798, 0],
        [5, 679, 4],
        [6, 523, 0],
        [7, 815, 2],
        [8, 841, -999],
        [9, 514, 8],
        [10, 458, 9],
        [11, 832, 10],
        [12, 543, 11],
        [13, 240, 12],
        [14, 548, 13],
        [15, 920, 14],
        [16, 920, 15],
        [17, 514, 16],
        [18, 458, 17],
        [180, 458, 17],
        [181, 458, 180],
        [19, 832, 18],
        [20, 543, 19],
        [21, 240, 16],
        [22, 548, 21],
        [23, 920, 22],
        [24, 240, 23],
        [25, 548, 12],
        [26, 920, 25],
        [27, 920, 26],
        [28, 920, 27],
        [2800, 920, 2700],
    ]


@pytest.fixture
def network_circulars(network_clean: List[List[int]]) -> List[List[int]]:
    """
    Extends the clean network by adding circular references for testing.

    Returns
    -------
    List[List[int]]
        Extended network including circular references with same structure as network_clean
    """
    return [
        [50, 178, 51],
        [51, 178, 50],
        [60, 178, 61],
        [61, 178, 62],
        [62, 178, 60],
    ] + network_clean


@pytest.fixture
def test_terminal_code() -> int:
    """
    Code (-999) indicating terminal nodes in network_clean
    """
    return -999


@pytest.fixture
def test_segment_df(network_clean: List[List[int]]) -> pd.DataFrame:
    """
    network_clean as a segment table with ID, length and toID columns.
    """
    return pd.DataFrame(network_clean, columns=["ID", "length", "toID"])


@pytest.fixture
def expected_connections() -> Dict[int, List[int]]:
    """
    Defines expected downstream connections of network_clean.

    Returns
    -------
    Dict[int, List[int]]
        Mapping of node IDs to lists of their downstream connecting nodes
    """
    return {
        0: [],
        1: [4],
        2: [0],
        3: [2],
        4: [0],
        5: [4],
        6: [0],
        7: [2],
        8: [],
        9: [8],
        10: [9],
        11: [10],
        12: [11],
        13: [12],
        14: [13],
        15: [14],
        16: [15],
        17: [16],
        18: [17],
        180: [17],
        181: [180],
        19: [18],
        20: [19],
        21: [16],
        22: [21],
        23: [22],
        24: [23],
        25: [12],
        26: [25],
        27: [26],
        28: [27],
        2800: [],
    }


@pytest.fixture
def expected_rconn() -> Dict[int, List[int]]:
    """
    Defines expected upstream connections of network_clean.

    Returns
    -------
    Dict[int, List[int]]
        Mapping of node IDs to lists of their upstream connecting nodes
    """
    return {
        0: [2, 4, 6],
        1: [],
        4: [1, 5],
        2: [3, 7],
        3: [],
        5: [],
        6: [],
        7: [],
        8: [9],
        9: [10],
        10: [11],
        11: [12],
        12: [13, 25],
        13: [14],
        14: [15],
        15: [16],
        16: [17, 21],
        17: [18, 180],
        18: [19],
        180: [181],
        181: [],
        19: [20],
        20: [],
        21: [22],
        22: [23],
        23: [24],
        24: [],
        25: [26],
        26: [27],
        27: [28],
        28: [],
        2800: [],
    }


@pytest.fixture
def walker_network() -> pd.DataFrame:
    """
    Two small named networks draining to outlets 1 and 10.

    Network 1 carries a mainstem named "A" (1-2-4-8) and a named
    tributary "B" (3-6). Network 10 is unnamed and followed by weight.

    Returns
    -------
    pd.DataFrame
        Segment table with ID, toID, nameID, weight and length columns
    """
    return pd.DataFrame(
        {
            "ID": [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
            "toID": [0, 1, 1, 2, 2, 3, 3, 4, 4, 0, 10, 10],
            "nameID": ["A", "A", "B", "A", "", "B", None, "A", "C", "-1", " ", np.nan],
            "weight": [10.0, 8.0, 5.0, 6.0, 1.0, 4.0, 0.5, 3.0, 2.5, 3.0, 2.0, 1.0],
            "length": [1.0, 2.0, 1.5, 2.0, 1.0, 1.0, 0.5, 1.0, 1.0, 2.0, 1.0, 1.0],
        }
    )


@pytest.fixture
def walker_partition() -> set:
    """
    Expected level path membership of walker_network.
    """
    return {
        frozenset({1, 2, 4, 8}),
        frozenset({3, 6}),
        frozenset({5}),
        frozenset({7}),
        frozenset({9}),
        frozenset({10, 11}),
        frozenset({12}),
    }


@pytest.fixture
def walker_outlets() -> Dict[int, int]:
    """
    Expected outletID of every segment in walker_network.
    """
    return {1: 1, 2: 1, 4: 1, 8: 1, 3: 3, 6: 3, 5: 5, 7: 7, 9: 9, 10: 10, 11: 10, 12: 12}


@pytest.fixture
def confluence_network() -> pd.DataFrame:
    """
    A single confluence where the name match is lighter than the named
    tributary: "Main" weighs 10, "Trib" weighs 50.
    """
    return pd.DataFrame(
        {
            "ID": [1, 2, 3],
            "toID": [0, 1, 1],
            "nameID": ["Main", "Main", "Trib"],
            "weight": [60.0, 10.0, 50.0],
        }
    )


@pytest.fixture
def chain_network() -> pd.DataFrame:
    """
    Linear chain 1 -> 2 -> 3 -> terminal with lengths 2, 3 and 5.
    """
    return pd.DataFrame(
        {
            "ID": [1, 2, 3],
            "toID": [2, 3, None],
            "nameID": ["", "", ""],
            "weight": [1.0, 1.0, 1.0],
            "length": [2.0, 3.0, 5.0],
        }
    )


@pytest.fixture
def cycle_network() -> pd.DataFrame:
    """
    Two segments draining into each other.
    """
    return pd.DataFrame(
        {
            "ID": [1, 2],
            "toID": [2, 1],
            "nameID": ["", ""],
            "weight": [1.0, 1.0],
            "length": [1.0, 1.0],
        }
    )


def make_random_network(seed: int, size: int = 300, outlets: int = 3) -> pd.DataFrame:
    """
    Random many-to-one network with `outlets` independent trees.

    Segment i drains to a random segment with a smaller ID, the first
    `outlets` segments drain to the terminal. Rows are shuffled.
    """
    rng = np.random.default_rng(seed)
    ids = np.arange(1, size + 1)
    to_ids = np.zeros(size, dtype=int)
    for k in range(outlets, size):
        to_ids[k] = rng.integers(1, k + 1)
    names = rng.choice(["", "", "Alpha", "Beta", "Gamma", "-1"], size=size)
    weights = rng.integers(1, 20, size=size).astype(float)
    lengths = rng.uniform(0.1, 5.0, size=size)
    df = pd.DataFrame(
        {"ID": ids, "toID": to_ids, "nameID": names, "weight": weights, "length": lengths}
    )
    return df.sample(frac=1.0, random_state=seed).reset_index(drop=True)


@pytest.fixture(params=[1, 7, 42])
def random_network(request) -> pd.DataFrame:
    """
    Randomly generated, shuffled, acyclic networks.
    """
    return make_random_network(request.param)

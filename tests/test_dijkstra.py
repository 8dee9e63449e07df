import pytest

from pathroute.common import EdgeId, from_base58
from pathroute.dfs import DFS
from pathroute.dijkstra import Dijkstra, DirectedGraph

NAMES = [
    "AGeTrARjozPVLhuzMxZq36THMtvsrZNAHq",
    "AYMnqA65pJFKAbbpD8hi5gdNDBmeFBy5hS",
    "AJtzEUDLzsRKbHC1Tfc1oNh8a1edpnVAUf",
    "AWpW2ukMkgkgRKtwWxC3viXEX8ijLio2Ng",
    "AMkN2sRQyT3qHZQqwEycHCX2ezdZNpXNdJ",
    "Ac54scP31i6h5zUsYGPegLf2yUSCK74KYC",
    "AQAz1RTZLW6ptervbNzs29rXKvKJuFNxMg",
]
ADDRS = [from_base58(name) for name in NAMES]


def _build(count, pairs, weights=None):
    nodes = {ADDRS[k]: k for k in range(count)}
    weights = weights or [1] * len(pairs)
    edges = {
        EdgeId.from_addresses(ADDRS[a], ADDRS[b]): weight
        for (a, b), weight in zip(pairs, weights)
    }
    return nodes, edges


def _run(route, count, pairs, source, target, blacklist=None, weights=None):
    nodes, edges = _build(count, pairs, weights)
    route.new_topology(nodes, edges, blacklist)
    spt = route.get_short_path_tree(ADDRS[source], ADDRS[target])
    return [[nodes[addr] for addr in path] for path in spt]


def _both_ways(pairs):
    return [p for a, b in pairs for p in ((a, b), (b, a))]


BASIC_EDGES = [(1, 0), (2, 0), (2, 1), (3, 1), (1, 2), (3, 2), (4, 2), (4, 3), (3, 4)]
BASIC_WEIGHTS = [10, 3, 1, 2, 4, 8, 2, 7, 9]
SPT_EDGES = _both_ways([(0, 1), (0, 2), (2, 3)]) + [(4, 2), (2, 4)]
SUBNET_EDGES = _both_ways([(0, 1), (0, 2), (2, 3), (1, 3), (4, 5), (4, 6), (5, 6)])
TWO_HOPS_EDGES = _both_ways([(0, 1), (0, 2), (2, 3), (1, 3), (4, 0), (2, 5), (3, 6)])
CIRCLE_EDGES = _both_ways([(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 0)])
DIAMOND_EDGES = [(0, 1), (1, 4), (2, 4), (3, 4), (1, 2), (2, 3), (1, 3)]
MULTI_EDGES = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (0, 2), (0, 3), (0, 4)]


def test_basic():
    spt = _run(Dijkstra(), 5, BASIC_EDGES, 0, 3, weights=BASIC_WEIGHTS)
    assert spt == [[3, 1, 2, 0]]


@pytest.mark.parametrize(
    "count, pairs, source, target, expected",
    [
        (5, SPT_EDGES, 1, 4, [4, 2, 0, 1]),
        (7, SUBNET_EDGES, 1, 3, [3, 1]),
        (7, SUBNET_EDGES, 4, 6, [6, 4]),
        (7, TWO_HOPS_EDGES, 4, 5, [5, 2, 0, 4]),
        (7, CIRCLE_EDGES, 0, 6, [6, 0]),
        (5, DIAMOND_EDGES, 3, 1, [1, 3]),
        (7, MULTI_EDGES, 5, 0, [0, 4, 5]),
    ],
)
def test_matches_shortest_dfs_path(count, pairs, source, target, expected):
    dfs_spt = _run(DFS(), count, pairs, source, target)
    dijkstra_spt = _run(Dijkstra(), count, pairs, source, target)
    assert dijkstra_spt == [expected]
    assert dfs_spt[0] == dijkstra_spt[0]


def test_blacklist_with_multi_path():
    pairs = [(0, 1), (0, 2), (1, 3), (2, 3), (2, 1), (1, 2)]
    weights = [1, 2, 1, 2, 1, 1]
    blacklist = [ADDRS[1]]
    dfs_spt = _run(DFS(), 4, pairs, 3, 0, blacklist=blacklist, weights=weights)
    dijkstra_spt = _run(Dijkstra(), 4, pairs, 3, 0, blacklist=blacklist, weights=weights)
    assert dijkstra_spt == [[0, 2, 3]]
    assert dfs_spt[0] == dijkstra_spt[0]


def test_blacklist_with_pair_path():
    pairs = [(0, 1), (1, 0)]
    blacklist = [ADDRS[1]]
    assert _run(DFS(), 2, pairs, 0, 1, blacklist=blacklist) == []
    assert _run(Dijkstra(), 2, pairs, 0, 1, blacklist=blacklist) == [[]]


def test_same_source_and_target():
    nodes, edges = _build(3, SPT_EDGES[:2])
    graph = DirectedGraph(nodes, edges)
    assert graph.get_pair_shortest_path(ADDRS[1], ADDRS[1]) == [[ADDRS[1]]]


def test_unreachable_target_gives_empty_path():
    nodes, edges = _build(5, DIAMOND_EDGES)
    graph = DirectedGraph(nodes, edges)
    assert graph.get_pair_shortest_path(ADDRS[1], ADDRS[3]) == [[]]


def test_unknown_source_gives_empty_path():
    nodes, edges = _build(3, SPT_EDGES[:2])
    graph = DirectedGraph(nodes, edges, [ADDRS[0]])
    assert graph.get_pair_shortest_path(ADDRS[0], ADDRS[1]) == [[]]


def test_graph_vertices_hold_weights():
    nodes, edges = _build(5, BASIC_EDGES, BASIC_WEIGHTS)
    graph = DirectedGraph(nodes, edges)
    assert len(graph) == 5
    assert graph[ADDRS[2]].incoming == {ADDRS[1]: 4, ADDRS[3]: 8, ADDRS[4]: 2}
    assert graph[ADDRS[2]].outgoing == {ADDRS[0]: 3, ADDRS[1]: 1}


def test_graph_blacklist_drops_vertex_and_its_edges():
    nodes, edges = _build(5, BASIC_EDGES, BASIC_WEIGHTS)
    graph = DirectedGraph(nodes, edges, [ADDRS[2]])
    assert ADDRS[2] not in graph
    assert set(graph) == {ADDRS[0], ADDRS[1], ADDRS[3], ADDRS[4]}
    assert ADDRS[2] not in graph[ADDRS[0]].incoming
    assert ADDRS[2] not in graph[ADDRS[4]].outgoing


def test_edges_to_unknown_nodes_are_dropped():
    nodes, edges = _build(2, [(0, 1), (1, 2)])
    graph = DirectedGraph(nodes, edges)
    assert graph[ADDRS[1]].outgoing == {}
    assert graph[ADDRS[0]].outgoing == {ADDRS[1]: 1}


def test_route_requires_topology():
    with pytest.raises(RuntimeError):
        Dijkstra().get_short_path_tree(ADDRS[0], ADDRS[1])
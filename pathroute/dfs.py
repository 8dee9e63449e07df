"""Depth-first enumeration of every simple path between two nodes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pathroute.common import Address, EdgeId
from pathroute.route import Route, ShortPathTree


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    node_a: Address
    node_b: Address
    distance: int


class Topology:
    """A directed network; the paths found by searches accumulate on it."""

    def __init__(
        self,
        nodes: Mapping[Address, int],
        edges: Mapping[EdgeId, int],
        blacklist: Iterable[Address] | None = None,
    ) -> None:
        banned = set(blacklist or ())
        self.nodes: dict[Address, int] = {
            addr: value for addr, value in nodes.items() if addr not in banned
        }
        self.edges: dict[Address, dict[Address, int]] = {}
        for edge_id, distance in edges.items():
            addr1, addr2 = edge_id.addr1(), edge_id.addr2()
            if addr1 in banned or addr2 in banned:
                continue
            self.edges.setdefault(addr1, {})[addr2] = distance
        self._paths: ShortPathTree = []

    def _is_empty(self) -> bool:
        return not self.nodes or not self.edges

    def get_all_path(self, source: Address) -> ShortPathTree:
        """Return every simple path starting at source, prefixes included."""
        if self._is_empty():
            return []
        self._search_all(source, [])
        return list(self._paths)

    def get_all_path_sorted(self, source: Address) -> ShortPathTree:
        """Like get_all_path, ordered from shortest to longest."""
        self.get_all_path(source)
        self._paths.sort(key=len)
        return list(self._paths)

    def _search_all(self, node: Address, path: list[Address]) -> None:
        path = path + [node]
        if path in self._paths:
            return
        self._paths.append(path)
        for neighbour in self.edges.get(node, {}):
            if neighbour not in path:
                self._search_all(neighbour, path)

    def get_pair_path(self, source: Address, target: Address) -> ShortPathTree:
        """Return every simple path [target, ..., source] along the edges' direction."""
        if self._is_empty():
            return []
        self._search_to(source, target, [])
        return list(self._paths)

    def get_pair_path_sorted(self, source: Address, target: Address) -> ShortPathTree:
        """Like get_pair_path, ordered from shortest to longest."""
        self.get_pair_path(source, target)
        self._paths.sort(key=len)
        return list(self._paths)

    def _search_to(self, source: Address, node: Address, path: list[Address]) -> None:
        path = path + [node]
        if node == source:
            self._paths.append(path)
            return
        if path in self._paths:
            return
        for neighbour in self.edges.get(node, {}):
            if neighbour not in path:
                self._search_to(source, neighbour, path)


class DFS(Route):
    """A route that lists every path, shortest first."""

    def __init__(self) -> None:
        self.topology: Topology | None = None

    def new_topology(
        self,
        nodes: Mapping[Address, int],
        edges: Mapping[EdgeId, int],
        blacklist: Iterable[Address] | None = None,
    ) -> None:
        self.topology = Topology(nodes, edges, blacklist)

    def get_short_path_tree(self, source: Address, target: Address) -> ShortPathTree:
        if self.topology is None:
            raise RuntimeError("no topology: call new_topology first")
        return self.topology.get_pair_path_sorted(source, target)
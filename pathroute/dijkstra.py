"""Shortest paths by Dijkstra's algorithm, with blacklisted nodes left out."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from pathroute.common import Address, EdgeId
from pathroute.route import Route, ShortPathTree

_UNREACHABLE = 2**63 - 1


@dataclass
class Vertex:
    """Edge weights by neighbour: edges leaving this vertex and edges arriving at it."""

    outgoing: dict[Address, int] = field(default_factory=dict)
    incoming: dict[Address, int] = field(default_factory=dict)


class DirectedGraph(Mapping):
    """A weighted directed graph, mapping each address to its vertex."""

    def __init__(
        self,
        nodes: Iterable[Address],
        edges: Mapping[EdgeId, int],
        blacklist: Iterable[Address] | None = None,
    ) -> None:
        banned = set(blacklist or ())
        self._vertices: dict[Address, Vertex] = {
            addr: Vertex() for addr in nodes if addr not in banned
        }
        for edge_id, distance in edges.items():
            addr1, addr2 = edge_id.addr1(), edge_id.addr2()
            if addr1 in self._vertices and addr2 in self._vertices:
                self._vertices[addr1].outgoing[addr2] = distance
                self._vertices[addr2].incoming[addr1] = distance

    def __getitem__(self, address: Address) -> Vertex:
        return self._vertices[address]

    def __iter__(self) -> Iterator[Address]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def get_pair_shortest_path(self, source: Address, target: Address) -> ShortPathTree:
        """Return [[target, ..., source]], the lightest path along the edges' direction.

        The single path is empty when target cannot reach source.
        """
        dist = {source: 0}
        settled = {source}
        paths = {source: [source]}
        current = source
        while current != target:
            vertex = self._vertices.get(current)
            if vertex is not None:
                for node, distance in vertex.incoming.items():
                    known = dist.setdefault(node, _UNREACHABLE)
                    if node not in settled and dist[current] + distance < known:
                        dist[node] = dist[current] + distance
                        paths[node] = paths[current] + [node]
            nearest, best = None, _UNREACHABLE
            for node, distance in dist.items():
                if node in settled:
                    continue
                # On a tie the target wins.
                if distance < best or (distance == best and node == target):
                    nearest, best = node, distance
            if best == _UNREACHABLE:
                break
            settled.add(nearest)
            current = nearest
        return [list(reversed(paths.get(target, [])))]


class Dijkstra(Route):
    """A route that returns the single lightest path."""

    def __init__(self) -> None:
        self.directed_graph: DirectedGraph | None = None

    def new_topology(
        self,
        nodes: Mapping[Address, int],
        edges: Mapping[EdgeId, int],
        blacklist: Iterable[Address] | None = None,
    ) -> None:
        self.directed_graph = DirectedGraph(nodes, edges, blacklist)

    def get_short_path_tree(self, source: Address, target: Address) -> ShortPathTree:
        if self.directed_graph is None:
            raise RuntimeError("no topology: call new_topology first")
        return self.directed_graph.get_pair_shortest_path(source, target)
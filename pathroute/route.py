"""The interface shared by path finders, and path ordering."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping

from pathroute.common import Address, EdgeId

ShortPathTree = list[list[Address]]


def sort_paths(paths: Iterable[list[Address]]) -> ShortPathTree:
    """Return the paths ordered from fewest hops to most."""
    return sorted(paths, key=len)


class Route(abc.ABC):
    """A path finder over a network of addresses."""

    @abc.abstractmethod
    def new_topology(
        self,
        nodes: Mapping[Address, int],
        edges: Mapping[EdgeId, int],
        blacklist: Iterable[Address] | None = None,
    ) -> None:
        """Build the graph from nodes and weighted edges, leaving out blacklisted nodes."""

    @abc.abstractmethod
    def get_short_path_tree(self, source: Address, target: Address) -> ShortPathTree:
        """Return paths, each laid out as [target, ..., source]."""
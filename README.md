# pathroute

Route search over a directed graph whose nodes are 20-byte addresses and
whose edges are weighted links from one address to another. Two path finders
share one interface, `pathroute.route.Route`:

- `pathroute.dfs.DFS` lists every simple path between two nodes, sorted from
  fewest hops to most.
- `pathroute.dijkstra.Dijkstra` returns the single lightest path by edge
  weight.

Both take an optional blacklist of addresses when the graph is built;
blacklisted nodes, and every edge that touches them, are left out.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Usage

```python
from pathroute.common import EdgeId, from_base58
from pathroute.dfs import DFS
from pathroute.dijkstra import Dijkstra

a = from_base58("AGeTrARjozPVLhuzMxZq36THMtvsrZNAHq")
b = from_base58("AYMnqA65pJFKAbbpD8hi5gdNDBmeFBy5hS")
c = from_base58("AJtzEUDLzsRKbHC1Tfc1oNh8a1edpnVAUf")

nodes = {a: 0, b: 1, c: 2}
edges = {
    EdgeId.from_addresses(a, b): 1,
    EdgeId.from_addresses(b, c): 1,
    EdgeId.from_addresses(a, c): 5,
}

router = Dijkstra()
router.new_topology(nodes, edges)
router.get_short_path_tree(c, a)   # [[a, b, c]]

every = DFS()
every.new_topology(nodes, edges, blacklist=[])
every.get_short_path_tree(c, a)    # [[a, c], [a, b, c]]
```

### Path direction

`get_short_path_tree(source, target)` returns a list of paths, each laid out
as `[target, ..., source]`. A path follows the edges' direction from `target`
to `source`: in the example above, `a -> b -> c` is reported for
`source=c, target=a`.

When `target` cannot reach `source`, `Dijkstra` returns `[[]]` and `DFS`
returns `[]`. Calling `get_short_path_tree` before `new_topology` raises
`RuntimeError`.

### The graph objects

- `pathroute.dfs.Topology(nodes, edges, blacklist=None)` holds the graph the
  `DFS` router searches. Besides `get_pair_path` / `get_pair_path_sorted`
  it offers `get_all_path(source)` / `get_all_path_sorted(source)`, which
  list every simple path starting at `source`, each prefix included. Paths
  found by searches accumulate on the `Topology`, so later calls return the
  earlier results as well; build a new topology for a fresh search.
- `pathroute.dfs.Edge` is a frozen dataclass of `node_a`, `node_b` and
  `distance`.
- `pathroute.dijkstra.DirectedGraph(nodes, edges, blacklist=None)` is a
  read-only mapping from each address to a `Vertex`, whose `outgoing` and
  `incoming` dicts give edge weights by neighbour. Its
  `get_pair_shortest_path(source, target)` is what `Dijkstra` calls. When
  several nodes are equally near, the target is taken first.
- `pathroute.route.sort_paths(paths)` orders paths from fewest hops to most.

## Addresses

`pathroute.common` provides:

- `Address` (20 bytes) and `EdgeId` (40 bytes: start address then end
  address), both `bytes` subclasses that reject any other length with
  `ValueError`. `EdgeId.from_addresses(a, b)` builds an identifier;
  `addr1()` and `addr2()` split it again.
- `to_text()` / `from_text()` on both types: the bracketed decimal form,
  e.g. `[0 1 2 ... 19]`. Malformed text raises `ValueError`.
- `to_base58(address)` / `from_base58(text)`: base58 with the Bitcoin
  alphabet. `from_base58` keeps the first 20 decoded bytes and zero-fills a
  shorter result. `b58encode(data)` / `b58decode(text)` work on raw bytes;
  `b58decode` raises `ValueError` on an empty string or a character outside
  the alphabet.
- `address_contains(addrs, address)`: membership test; `None` holds nothing.

## What it does not do

This is a library only: there is no command-line tool, no network code and
no storage. Graphs are built from in-memory mappings of nodes and edges.

## Running the tests

```
pip install -e ".[test]"
pytest
```
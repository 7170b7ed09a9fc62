"""Single-source shortest-path search over an abstract node graph.

The graph is never materialised: adjacency is decided by a caller-supplied
predicate, which typically inspects grid coordinates and values. Every edge
has weight 1.

Minimum selection is a linear scan over the unvisited set, giving O(V^2)
time. A binary heap keyed by distance would yield the same distances for
large vertex sets; only the choice between equally short paths could differ.
"""

import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from gridkit.config import SearchConfig
from gridkit.core.geometry import is_neighbor_of
from gridkit.domain import Node
from gridkit.exceptions import ElevationError, VertexNotFoundError

T = TypeVar("T")

Position = tuple[int, int]
NeighborPredicate = Callable[[Node[T], Node[T]], bool]


def shortest_path(
    vertices: Iterable[Node[T]],
    source: Node[T],
    target: Node[T],
    is_neighbor: NeighborPredicate[T],
) -> list[Node[T]]:
    """Find a shortest path from ``source`` to ``target``.

    Vertices are identified by position; values are not compared. When
    several unvisited vertices share the minimum distance the first one in
    ``vertices`` iteration order is taken, so different but equally short
    paths are possible across vertex orderings.

    Args:
        vertices: All nodes of the graph
        source: Start node
        target: End node
        is_neighbor: ``is_neighbor(candidate, current)`` returns True when
            ``candidate`` can be reached from ``current`` in one step

    Returns:
        Nodes from source to target inclusive, or an empty list when the
        target is unreachable. ``[source]`` when source and target coincide.

    Raises:
        VertexNotFoundError: If source or target is not in ``vertices``
    """
    nodes: dict[Position, Node[T]] = {node.position: node for node in vertices}

    if source.position not in nodes:
        raise VertexNotFoundError("source", source.position)
    if target.position not in nodes:
        raise VertexNotFoundError("target", target.position)

    if source.position == target.position:
        return [nodes[source.position]]

    dist: dict[Position, float] = {position: math.inf for position in nodes}
    prev: dict[Position, Position | None] = {position: None for position in nodes}
    dist[source.position] = 0

    # dict keeps insertion order, which fixes the tie-break
    unvisited: dict[Position, Node[T]] = dict(nodes)

    while unvisited:
        u = min(unvisited, key=dist.__getitem__)
        if dist[u] == math.inf:
            break

        current = unvisited.pop(u)
        if u == target.position:
            break

        alt = dist[u] + 1
        for v, candidate in unvisited.items():
            if alt < dist[v] and is_neighbor(candidate, current):
                dist[v] = alt
                prev[v] = u

    if prev[target.position] is None:
        return []

    path: list[Node[T]] = []
    step: Position | None = target.position
    while step is not None:
        path.append(nodes[step])
        step = prev[step]
    path.reverse()
    return path


def elevation(symbol: str, config: SearchConfig) -> int:
    """Return the height of a terrain symbol.

    Letters a-z are heights 0-25; the start symbol counts as ``a`` and the
    end symbol as ``z``.

    Raises:
        ElevationError: If the symbol is not a lowercase letter, start or end
    """
    if symbol == config.start_symbol:
        symbol = "a"
    elif symbol == config.end_symbol:
        symbol = "z"
    if len(symbol) != 1 or not "a" <= symbol <= "z":
        raise ElevationError(symbol)
    return ord(symbol) - ord("a")


def make_step_predicate(config: SearchConfig) -> NeighborPredicate[str]:
    """Build the adjacency predicate for a symbol grid.

    Steps are orthogonal. With ``config.climb`` a step may also rise at most
    ``config.max_climb`` levels; descending is unrestricted.
    """
    if not config.climb:
        return is_neighbor_of

    def can_step(candidate: Node[str], current: Node[str]) -> bool:
        if not is_neighbor_of(candidate, current):
            return False
        rise = elevation(candidate.value, config) - elevation(current.value, config)
        return rise <= config.max_climb

    return can_step

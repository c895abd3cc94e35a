"""
Non-backtracking shortest paths over any graph of ``Vertex``/``Edge`` objects.

A non-backtracking path never traverses an edge u -> v immediately followed
by an edge v -> u. This models agents that cannot turn around on the spot:
the shortest allowed route may be longer than the unconstrained shortest
path, and some vertices may be unreachable even though a path exists.

The search is Dijkstra's algorithm over an indexed ``MinPQueue`` frontier.
Each vertex carries the edge used to reach it, and a settled vertex relaxes
every outgoing edge except the one leading straight back to where it came
from. Every call is a fresh computation with its own queue and result dict,
so concurrent queries against the same (immutable) graph need no locking.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .common import Edge, PreconditionError, Vertex
from .priority_queue import MinPQueue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathEnd:
    """
    Summary of the shortest known non-backtracking path to a vertex.

    Attributes:
        distance: Total weight of the path
        last_edge: Final edge of the path. For the source vertex this is the
            ``previous_edge`` supplied to ``path_info`` (possibly None).
    """

    distance: float
    last_edge: Optional[Edge]


def path_info(src: Vertex, previous_edge: Optional[Edge] = None) -> Dict[Vertex, PathEnd]:
    """
    Shortest non-backtracking paths from ``src`` to every reachable vertex.

    Args:
        src: Source vertex
        previous_edge: Edge the traveller just used to arrive at ``src``; the
            first step may not reverse it. None if there is no such edge.

    Returns:
        Dict mapping each vertex reachable from ``src`` along a
        non-backtracking path to the ``PathEnd`` of the shortest such path.
        ``src`` itself maps to ``PathEnd(0, previous_edge)``.

    Raises:
        PreconditionError: If ``previous_edge`` does not end at ``src``
    """
    if previous_edge is not None and previous_edge.dst != src:
        raise PreconditionError(
            f"previous_edge {previous_edge!r} must end at the source vertex {src!r}"
        )

    paths: Dict[Vertex, PathEnd] = {src: PathEnd(0.0, previous_edge)}
    frontier: MinPQueue[Vertex] = MinPQueue()
    frontier.add_or_update(src, 0.0)
    settled = 0

    while not frontier.is_empty():
        v = frontier.remove()
        settled += 1
        current = paths[v]
        last_edge = current.last_edge

        for edge in v.outgoing_edges():
            neighbor = edge.dst
            # Reversing the edge we arrived along is not allowed
            if last_edge is not None and neighbor == last_edge.src:
                continue

            distance = current.distance + edge.weight
            known = paths.get(neighbor)
            if known is None or distance < known.distance:
                paths[neighbor] = PathEnd(distance, edge)
                frontier.add_or_update(neighbor, distance)

    logger.debug(f"path_info from {src!r}: settled {settled}, reached {len(paths)}")
    return paths


def path_to(paths: Dict[Vertex, PathEnd], src: Vertex, dst: Vertex) -> List[Edge]:
    """
    Edges of the path from ``src`` to ``dst`` recorded in ``paths``.

    Follows ``last_edge`` backpointers from ``dst`` until ``src`` is reached
    and returns the edges in travel order (empty if ``src == dst``).

    Args:
        paths: Result of ``path_info(src, ...)``

    Raises:
        PreconditionError: If a vertex on the way back has no record, i.e.
            ``paths`` was not computed from ``src`` or ``dst`` is unreachable
    """
    path: List[Edge] = []
    current = dst
    while current != src:
        end = paths.get(current)
        if end is None or end.last_edge is None:
            raise PreconditionError(f"no recorded path from {src!r} to {current!r}")
        path.append(end.last_edge)
        current = end.last_edge.src
        if len(path) > len(paths):
            raise PreconditionError(f"backpointers from {dst!r} do not lead to {src!r}")
    path.reverse()
    return path


def shortest_non_backtracking_path(
    src: Vertex, dst: Vertex, previous_edge: Optional[Edge] = None
) -> Optional[List[Edge]]:
    """
    Shortest non-backtracking path from ``src`` to ``dst``.

    Args:
        src: Source vertex
        dst: Destination vertex
        previous_edge: Edge just used to arrive at ``src``, or None

    Returns:
        The path's edges in travel order, an empty list if ``src == dst``,
        or None if no non-backtracking path exists.

    Raises:
        PreconditionError: If ``previous_edge`` does not end at ``src``
    """
    paths = path_info(src, previous_edge)
    if dst not in paths:
        return None
    return path_to(paths, src, dst)


def path_weight(edges: Iterable[Edge]) -> float:
    """Total weight of a sequence of edges."""
    return sum((edge.weight for edge in edges), 0.0)

"""
Maze graph construction from tile maps.

Turns a ``GameMap`` into a weighted directed graph with one vertex per
traversable (PATH) tile and one edge per orthogonal step between vertices.
Steps off the edge of the map wrap around to the opposite boundary, so a PATH
tile in the leftmost column is joined to the PATH tile in the rightmost column
of the same row by a pair of tunnel edges (likewise for the top and bottom
rows).

Edge weights come from an injectable policy evaluated on
(source elevation, destination elevation); the default policy charges more
for climbing than for descending, so the two edges of a pair usually differ.
"""

import logging
import math
from collections import deque
from typing import Callable, Dict, Iterator, List, Optional, Set

import numpy as np

from .common import Coordinate, Direction, Edge, PreconditionError, TileType, Vertex
from .constants import MazeGraphDefaults
from .game_map import GameMap
from .. import config

logger = logging.getLogger(__name__)

EdgeWeightPolicy = Callable[[float, float], float]


def elevation_edge_weight(src_elevation: float, dst_elevation: float) -> float:
    """
    Default edge weight policy.

    ``base + climb * rise + descent * drop`` where rise/drop is the positive
    part of the elevation change in the direction of travel. Factors come
    from the global config.
    """
    settings = config.get_config()
    change = dst_elevation - src_elevation
    return (
        settings.base_weight
        + settings.climb_factor * max(0.0, change)
        + settings.descent_factor * max(0.0, -change)
    )


class MazeVertex(Vertex):
    """A traversable tile, holding at most one outgoing edge per direction."""

    def __init__(self, loc: Coordinate):
        self.loc = loc
        self._edges: Dict[Direction, "MazeEdge"] = {}

    def outgoing_edges(self) -> List["MazeEdge"]:
        return list(self._edges.values())

    def edge_in_direction(self, direction: Direction) -> Optional["MazeEdge"]:
        """Outgoing edge in ``direction``, or None if there is none."""
        return self._edges.get(direction)

    def _add_edge(self, edge: "MazeEdge") -> None:
        if edge.direction in self._edges:
            raise RuntimeError(
                f"{self!r} already has an outgoing {edge.direction.name} edge"
            )
        self._edges[edge.direction] = edge

    def __repr__(self) -> str:
        return f"MazeVertex(loc=({self.loc.i}, {self.loc.j}))"


class MazeEdge(Edge):
    """Directed edge between two maze vertices, travelling in ``direction``."""

    def __init__(self, src: MazeVertex, dst: MazeVertex, direction: Direction, weight: float):
        self._src = src
        self._dst = dst
        self._direction = direction
        self._weight = weight

    @property
    def src(self) -> MazeVertex:
        return self._src

    @property
    def dst(self) -> MazeVertex:
        return self._dst

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def is_tunnel(self) -> bool:
        """Whether this edge wraps around the map boundary."""
        di, dj = self._direction.delta
        src, dst = self._src.loc, self._dst.loc
        return (src.i + di, src.j + dj) != (dst.i, dst.j)

    def __repr__(self) -> str:
        return (
            f"MazeEdge(({self._src.loc.i}, {self._src.loc.j}) -> "
            f"({self._dst.loc.i}, {self._dst.loc.j}), {self._direction.name}, "
            f"weight={self._weight})"
        )


class MazeGraph:
    """
    Weighted directed graph of the PATH tiles of a ``GameMap``.

    Construction requires a seed cell: the vertex set is found by flood fill
    from the seed, and every PATH tile of the map must be reached (directly
    or through a tunnel), otherwise construction fails.

    Args:
        game_map: Tile kinds and elevations
        seed: A PATH cell from which every PATH cell is reachable
        edge_weight: Policy mapping (source elevation, destination elevation)
            to a non-negative weight. Defaults to ``elevation_edge_weight``.
        debug: Log every tunnel edge as it is created

    Raises:
        PreconditionError: If the seed is out of bounds or not a PATH tile,
            or if some PATH tile is unreachable from the seed
        ValueError: If the edge weight policy returns a negative or
            non-finite weight
    """

    def __init__(
        self,
        game_map: GameMap,
        seed: Coordinate,
        edge_weight: Optional[EdgeWeightPolicy] = None,
        debug: bool = False,
    ):
        self.game_map = game_map
        self.seed = Coordinate(*seed)
        self.edge_weight = edge_weight if edge_weight is not None else elevation_edge_weight
        self.debug = debug

        self._validate_seed()
        reachable = self._flood_fill()
        self._validate_connectivity(reachable)

        # Row-major order keeps vertices() and closest_to() tie-breaking deterministic
        ordered = sorted(reachable, key=lambda c: (c.j, c.i))
        self._vertices: Dict[Coordinate, MazeVertex] = {
            coord: MazeVertex(coord) for coord in ordered
        }
        self._num_edges = 0
        self._num_tunnel_edges = 0
        self._build_edges()
        self._ordered = list(self._vertices.values())
        self._locations = np.array(
            [[v.loc.i, v.loc.j] for v in self._ordered], dtype=np.float64
        )

        logger.debug(
            f"Built maze graph: {len(self._vertices)} vertices, {self._num_edges} edges "
            f"({self._num_tunnel_edges} tunnel) from seed {tuple(self.seed)}"
        )

    def _debug_log(self, message: str):
        """Log debug message if debug mode is enabled."""
        if self.debug:
            logger.debug(f"[MazeGraph DEBUG] {message}")

    def _neighbor(self, coord: Coordinate, direction: Direction) -> Coordinate:
        """Cell one step in ``direction``, wrapping around the map boundary."""
        di, dj = direction.delta
        return Coordinate(
            (coord.i + di) % self.game_map.width, (coord.j + dj) % self.game_map.height
        )

    def _is_path(self, coord: Coordinate) -> bool:
        return self.game_map.tiles[coord.j, coord.i] == TileType.PATH

    def _validate_seed(self) -> None:
        if not self.game_map.in_bounds(self.seed):
            raise PreconditionError(
                f"seed {tuple(self.seed)} is outside the "
                f"{self.game_map.width}x{self.game_map.height} map"
            )
        if not self._is_path(self.seed):
            raise PreconditionError(
                f"seed {tuple(self.seed)} is a {self.game_map.tile_at(self.seed).name} "
                f"tile, expected PATH"
            )

    def _flood_fill(self) -> Set[Coordinate]:
        """Breadth-first search over PATH cells from the seed."""
        visited = {self.seed}
        queue = deque([self.seed])
        while queue:
            current = queue.popleft()
            for direction in Direction:
                neighbor = self._neighbor(current, direction)
                if neighbor not in visited and self._is_path(neighbor):
                    visited.add(neighbor)
                    queue.append(neighbor)
        return visited

    def _validate_connectivity(self, reachable: Set[Coordinate]) -> None:
        unreachable = [c for c in self.game_map.path_cells() if c not in reachable]
        if not unreachable:
            return
        sample = [tuple(c) for c in unreachable[: MazeGraphDefaults.MAX_REPORTED_CELLS]]
        logger.error(
            f"{len(unreachable)} PATH cells unreachable from seed {tuple(self.seed)}: {sample}"
        )
        raise PreconditionError(
            f"PATH tiles must form one connected component containing the seed "
            f"{tuple(self.seed)}; {len(unreachable)} cells are unreachable, e.g. {sample}"
        )

    def _weight(self, src: Coordinate, dst: Coordinate) -> float:
        weight = self.edge_weight(
            self.game_map.elevation_at(src), self.game_map.elevation_at(dst)
        )
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(
                f"edge weight policy returned {weight} for {tuple(src)} -> {tuple(dst)}; "
                f"weights must be finite and non-negative"
            )
        return float(weight)

    def _build_edges(self) -> None:
        for vertex in self._vertices.values():
            for direction in Direction:
                target = self._vertices.get(self._neighbor(vertex.loc, direction))
                if target is None:
                    continue
                edge = MazeEdge(vertex, target, direction, self._weight(vertex.loc, target.loc))
                vertex._add_edge(edge)
                self._num_edges += 1
                if edge.is_tunnel:
                    self._num_tunnel_edges += 1
                    self._debug_log(f"Tunnel edge {edge!r}")

    def vertices(self) -> List[MazeVertex]:
        """All vertices, in row-major order of their locations."""
        return list(self._ordered)

    def edges(self) -> Iterator[MazeEdge]:
        """All edges, grouped by source vertex."""
        for vertex in self._vertices.values():
            yield from vertex.outgoing_edges()

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def __contains__(self, coord) -> bool:
        return Coordinate(*coord) in self._vertices

    def contains(self, coord: Coordinate) -> bool:
        """Whether ``coord`` is the location of a vertex."""
        return coord in self

    def vertex_at(self, coord: Coordinate) -> MazeVertex:
        """
        Vertex located at ``coord``.

        Raises:
            KeyError: If ``coord`` is not a vertex location
        """
        try:
            return self._vertices[Coordinate(*coord)]
        except KeyError:
            raise KeyError(f"No vertex at {tuple(coord)}") from None

    def closest_to(self, x: float, y: float) -> MazeVertex:
        """
        Vertex whose location is nearest to the point (x, y).

        The point need not be a cell of the map. Distance uses the configured
        metric ("euclidean" or "manhattan"); ties go to the vertex that comes
        first in row-major order.
        """
        dx = self._locations[:, 0] - x
        dy = self._locations[:, 1] - y
        if config.get_config().distance_metric == "manhattan":
            distances = np.abs(dx) + np.abs(dy)
        else:
            distances = dx * dx + dy * dy
        # argmin returns the first minimum
        return self._ordered[int(np.argmin(distances))]

    def get_statistics(self) -> Dict[str, int]:
        """Vertex and edge counts of the graph."""
        return {
            "num_vertices": self.num_vertices,
            "num_edges": self._num_edges,
            "num_tunnel_edges": self._num_tunnel_edges,
            "num_path_tiles": len(self.game_map.path_cells()),
        }

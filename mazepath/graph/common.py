"""
Common graph components shared by the maze builder and the pathfinding engine.

This module contains the capability abstractions (``Vertex``/``Edge``) that the
pathfinding engine consumes, the grid value types used by the maze builder,
and the error classes raised across the package.
"""

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Iterable, NamedTuple, Tuple


class EmptyQueueError(IndexError):
    """Raised when the minimum of an empty priority queue is requested."""


class PreconditionError(ValueError):
    """Raised when a caller violates a documented precondition."""


class Coordinate(NamedTuple):
    """Grid cell location: ``i`` is the column, ``j`` is the row."""

    i: int
    j: int


class Direction(Enum):
    """Compass direction of travel between orthogonally adjacent cells."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (di, dj) taken when moving in this direction."""
        return self.value

    @property
    def inverse(self) -> "Direction":
        """Direction that undoes a step in this direction."""
        return _INVERSES[self]


_INVERSES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class TileType(IntEnum):
    """Tile kinds of a maze map. Only PATH tiles become graph vertices."""

    WALL = 0
    PATH = 1
    GHOSTBOX = 2


class Vertex(ABC):
    """
    Vertex capability consumed by the pathfinding engine.

    Any graph whose vertices expose their outgoing edges, and whose edges
    implement ``Edge``, can be searched by ``pathfinding.path_info``.
    Vertices are used as dictionary keys, so they must be hashable.
    """

    @abstractmethod
    def outgoing_edges(self) -> Iterable["Edge"]:
        """Edges leaving this vertex."""
        pass


class Edge(ABC):
    """Directed, weighted edge capability. ``weight`` must be non-negative."""

    @property
    @abstractmethod
    def src(self) -> Vertex:
        """Vertex this edge leaves."""
        pass

    @property
    @abstractmethod
    def dst(self) -> Vertex:
        """Vertex this edge enters."""
        pass

    @property
    @abstractmethod
    def weight(self) -> float:
        """Cost of traversing this edge."""
        pass

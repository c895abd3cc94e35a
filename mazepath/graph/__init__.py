"""
Graph representations and non-backtracking pathfinding for tile mazes.
"""

from .common import (
    Coordinate,
    Direction,
    TileType,
    Vertex,
    Edge,
    EmptyQueueError,
    PreconditionError,
)
from .priority_queue import MinPQueue
from .game_map import GameMap, gradient_elevations
from .maze_graph import MazeGraph, MazeVertex, MazeEdge, elevation_edge_weight
from .simple_graph import SimpleGraph, SimpleVertex, SimpleEdge
from .pathfinding import (
    PathEnd,
    path_info,
    path_to,
    path_weight,
    shortest_non_backtracking_path,
)

__all__ = [
    "Coordinate",
    "Direction",
    "TileType",
    "Vertex",
    "Edge",
    "EmptyQueueError",
    "PreconditionError",
    "MinPQueue",
    "GameMap",
    "gradient_elevations",
    "MazeGraph",
    "MazeVertex",
    "MazeEdge",
    "elevation_edge_weight",
    "SimpleGraph",
    "SimpleVertex",
    "SimpleEdge",
    "PathEnd",
    "path_info",
    "path_to",
    "path_weight",
    "shortest_non_backtracking_path",
]

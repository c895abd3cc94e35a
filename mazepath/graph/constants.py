"""
Constants for maze graph construction and pathfinding.

This module contains the configurable defaults used throughout the graph
package to avoid magic numbers and provide centralized configuration.
"""

# =============================================================================
# MAZE GRAPH CONSTANTS
# =============================================================================


class MazeGraphDefaults:
    """Default values for maze graph construction."""

    # Elevation edge weight: BASE + CLIMB * rise + DESCENT * drop
    BASE_WEIGHT: float = 1.0
    CLIMB_FACTOR: float = 1.0
    DESCENT_FACTOR: float = 0.25

    # Smallest map for which adjacency and tunnels never target the same cell
    MIN_MAP_WIDTH: int = 3
    MIN_MAP_HEIGHT: int = 3

    # Metric used by MazeGraph.closest_to
    DISTANCE_METRIC: str = "euclidean"
    DISTANCE_METRICS = ("euclidean", "manhattan")

    # Template gradient slopes (elevation = H * i + V * j)
    GRADIENT_HORIZONTAL_SLOPE: float = 2.0
    GRADIENT_VERTICAL_SLOPE: float = 1.0

    # Unreachable cells listed in a connectivity error message
    MAX_REPORTED_CELLS: int = 5


# =============================================================================
# PRIORITY QUEUE CONSTANTS
# =============================================================================


class PriorityQueueDefaults:
    """Default values for the indexed min-priority-queue."""

    # Re-verify heap order and index consistency after every mutation
    CHECK_INVARIANTS: bool = False


# =============================================================================
# TEXT GRAPH CONSTANTS
# =============================================================================


class TextGraphDefaults:
    """Default values for text-defined graphs."""

    DEFAULT_WEIGHT: float = 1.0
    DIRECTED_ARROW: str = "->"
    UNDIRECTED_ARROW: str = "--"
    COMMENT_PREFIX: str = "#"

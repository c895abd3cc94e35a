"""
Map data structure for maze graph construction.

This module provides the map source consumed by ``MazeGraph``: a rectangular
grid of tile kinds together with a co-indexed grid of real-valued elevations.
Grids are stored row-major, so the tile of ``Coordinate(i, j)`` lives at
``tiles[j, i]``.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional

from .common import Coordinate, TileType
from .constants import MazeGraphDefaults

_TEMPLATE_TILES = {
    "w": TileType.WALL,
    "p": TileType.PATH,
    "g": TileType.GHOSTBOX,
}


def gradient_elevations(
    width: int,
    height: int,
    horizontal_slope: float = MazeGraphDefaults.GRADIENT_HORIZONTAL_SLOPE,
    vertical_slope: float = MazeGraphDefaults.GRADIENT_VERTICAL_SLOPE,
) -> np.ndarray:
    """
    Create an elevation grid rising from the top-left to the bottom-right.

    Args:
        width: Number of columns
        height: Number of rows
        horizontal_slope: Elevation gained per column
        vertical_slope: Elevation gained per row

    Returns:
        Float array of shape (height, width) with
        ``elevations[j, i] == horizontal_slope * i + vertical_slope * j``

    Example:
        >>> gradient_elevations(3, 2)
        array([[0., 2., 4.],
               [1., 3., 5.]])
    """
    cols = np.arange(width, dtype=np.float64)
    rows = np.arange(height, dtype=np.float64)
    return horizontal_slope * cols[np.newaxis, :] + vertical_slope * rows[:, np.newaxis]


@dataclass
class GameMap:
    """
    Tile kinds and elevations of a rectangular maze.

    Attributes:
        tiles: 2D integer array of TileType values, shape (height, width)
        elevations: 2D float array of the same shape
    """

    tiles: np.ndarray
    elevations: np.ndarray

    def __post_init__(self):
        """Validate the grids after initialization."""
        if not isinstance(self.tiles, np.ndarray):
            raise TypeError("tiles must be a NumPy array")
        if not isinstance(self.elevations, np.ndarray):
            raise TypeError("elevations must be a NumPy array")

        if self.tiles.ndim != 2:
            raise ValueError("tiles must be a 2D array")
        if self.elevations.shape != self.tiles.shape:
            raise ValueError(
                f"elevations shape {self.elevations.shape} does not match "
                f"tiles shape {self.tiles.shape}"
            )

        height, width = self.tiles.shape
        if width < MazeGraphDefaults.MIN_MAP_WIDTH or height < MazeGraphDefaults.MIN_MAP_HEIGHT:
            raise ValueError(
                f"map must be at least {MazeGraphDefaults.MIN_MAP_WIDTH}x"
                f"{MazeGraphDefaults.MIN_MAP_HEIGHT} tiles, got {width}x{height}"
            )

        known = np.isin(self.tiles, [int(t) for t in TileType])
        if not known.all():
            j, i = np.argwhere(~known)[0]
            raise ValueError(
                f"unknown tile kind {int(self.tiles[j, i])} at {Coordinate(int(i), int(j))}"
            )

        self.elevations = self.elevations.astype(np.float64)
        if not np.isfinite(self.elevations).all():
            raise ValueError("elevations must be finite")

    @classmethod
    def from_template(
        cls, template: str, elevations: Optional[np.ndarray] = None
    ) -> "GameMap":
        """
        Create a map from lines of tile letters.

        'w' = WALL, 'p' = PATH and 'g' = GHOSTBOX; the lines must form a
        rectangle. Blank lines and surrounding whitespace are ignored. When
        ``elevations`` is omitted, ``gradient_elevations`` is used.

        Example:
            >>> game_map = GameMap.from_template('''
            ...     wwwww
            ...     wwpww
            ...     wwwww''')
            >>> game_map.width, game_map.height
            (5, 3)
        """
        rows: List[List[int]] = []
        for line_number, line in enumerate(template.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            row = []
            for letter in line:
                if letter not in _TEMPLATE_TILES:
                    raise ValueError(
                        f"line {line_number}: unknown tile letter {letter!r}"
                    )
                row.append(int(_TEMPLATE_TILES[letter]))
            rows.append(row)

        if not rows:
            raise ValueError("template contains no tiles")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("template lines must all have the same length")

        tiles = np.array(rows, dtype=np.int32)
        if elevations is None:
            elevations = gradient_elevations(width, len(rows))
        return cls(tiles=tiles, elevations=np.asarray(elevations))

    @property
    def height(self) -> int:
        """Get the height of the map in tiles."""
        return self.tiles.shape[0]

    @property
    def width(self) -> int:
        """Get the width of the map in tiles."""
        return self.tiles.shape[1]

    def in_bounds(self, coord: Coordinate) -> bool:
        return 0 <= coord.i < self.width and 0 <= coord.j < self.height

    def _check_bounds(self, coord: Coordinate) -> None:
        if not self.in_bounds(coord):
            raise IndexError(
                f"Coordinate {tuple(coord)} out of bounds for {self.width}x{self.height} map"
            )

    def tile_at(self, coord: Coordinate) -> TileType:
        """
        Get the tile kind at the specified cell.

        Raises:
            IndexError: If the coordinate is out of bounds
        """
        self._check_bounds(coord)
        return TileType(int(self.tiles[coord.j, coord.i]))

    def elevation_at(self, coord: Coordinate) -> float:
        """
        Get the elevation at the specified cell.

        Raises:
            IndexError: If the coordinate is out of bounds
        """
        self._check_bounds(coord)
        return float(self.elevations[coord.j, coord.i])

    def path_cells(self) -> List[Coordinate]:
        """All PATH cells in row-major order."""
        rows, cols = np.nonzero(self.tiles == TileType.PATH)
        return [Coordinate(int(i), int(j)) for j, i in zip(rows, cols)]

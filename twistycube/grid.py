"""
Mapping between grid positions, flat cubie indices and layer cells.
"""

import numpy as np
from typing import Tuple

from .faces import Axis

Position = Tuple[int, int, int]


def index(position: Position, size: int) -> int:
    """
    Flat index of a position, x varying fastest.

    Args:
        position: (x, y, z), each in [0, size)
        size (int): Cube size

    Returns:
        int: x + size*y + size^2*z
    """
    x, y, z = position
    return x + size * y + size * size * z


def position(flat_index: int, size: int) -> Position:
    """Inverse of index()."""
    x = flat_index % size
    y = (flat_index // size) % size
    z = flat_index // (size * size)
    return (x, y, z)


def layer_position(axis: Axis, layer_index: int, i: int, j: int) -> Position:
    """
    Position of cell (i, j) of a layer.

    The layer coordinate is inserted at the axis slot, so cells are ordered
    (y, z) for X, (x, z) for Y and (x, y) for Z.
    """
    cell = [i, j]
    cell.insert(axis.value, layer_index)
    return (cell[0], cell[1], cell[2])


def layer_indices(axis: Axis, layer_index: int, size: int) -> np.ndarray:
    """
    Flat indices of every cubie in a layer.

    Args:
        axis (Axis): The layer axis
        layer_index (int): Coordinate of the layer along the axis
        size (int): Cube size

    Returns:
        np.ndarray: size x size int array, grid[i, j] = index of cell (i, j)
    """
    grid = np.empty((size, size), dtype=np.intp)
    for i in range(size):
        for j in range(size):
            grid[i, j] = index(layer_position(axis, layer_index, i, j), size)
    return grid

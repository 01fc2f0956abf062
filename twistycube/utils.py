"""
Utility functions for inspecting cubes.
"""

import numpy as np
from typing import Dict, List, Optional

from .cube import Cube
from .cubie import Cubie
from .faces import Color, Face
from .grid import layer_position
from .rotation import Layer


def validate_size(size: int) -> bool:
    """
    Validate that a cube size is acceptable.

    Args:
        size (int): The size to validate

    Returns:
        bool: True if size is valid, False otherwise
    """
    return isinstance(size, int) and not isinstance(size, bool) and size >= 1


def get_layer(cube: Cube, layer) -> List[List[Cubie]]:
    """
    Get the cubies of one layer as a 2D grid.

    Args:
        cube (Cube): The cube to slice
        layer: Layer or (axis, index) pair

    Returns:
        List[List[Cubie]]: grid[i][j] is the cubie at layer cell (i, j)

    Raises:
        InvalidLayerError: If the axis is invalid or the index is out of bounds
    """
    layer = Layer.of(layer).validate(cube.size)
    return [
        [cube.cubie_at(layer_position(layer.axis, layer.index, i, j)) for j in range(cube.size)]
        for i in range(cube.size)
    ]


def is_solved(cube: Cube) -> bool:
    """Check whether every face of the cube shows a single color."""
    return cube.is_solved()


def face_grids(cube: Cube) -> Dict[str, List[List[Optional[Color]]]]:
    """All six face grids keyed by face letter."""
    return {face.name: cube.face_grid(face) for face in Face}


def facelets(cube: Cube) -> np.ndarray:
    """
    Snapshot of every visible sticker, for handing state to a renderer.

    Args:
        cube (Cube): The cube to snapshot

    Returns:
        np.ndarray: uint8 array of shape (6, size, size, 4), RGBA per cell,
                    faces in L, R, D, U, B, F order
    """
    out = np.zeros((len(Face), cube.size, cube.size, 4), dtype=np.uint8)
    for face in Face:
        for i, row in enumerate(cube.face_grid(face)):
            for j, color in enumerate(row):
                if color is not None:
                    out[face.value, i, j] = color
    return out

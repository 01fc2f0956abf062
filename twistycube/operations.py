"""
Functional operations on cubes. Each returns a new cube and leaves its input untouched.
"""

from typing import List, Optional

from .cube import Cube
from .faces import Color


def create(size: Optional[int] = None) -> Cube:
    """
    Create a solved cube.

    Args:
        size (int, optional): Size of the cube (default: settings.default_size)

    Returns:
        Cube: A new solved cube

    Raises:
        InvalidSizeError: If size is less than 1
    """
    return Cube(size)


def rotate(cube: Cube, layer, turns: int = 1) -> Cube:
    """
    Rotate one layer of a cube.

    Args:
        cube (Cube): The cube to rotate
        layer: Layer or (axis, index) pair, with axis 'x', 'y' or 'z'
        turns (int): Number of quarter turns (default: 1)

    Returns:
        Cube: A new rotated cube

    Raises:
        InvalidLayerError: If the axis is unknown or the index is out of range
    """
    result = cube.copy()
    result.rotate(layer, turns)
    return result


def face_grid(cube: Cube, face) -> List[List[Optional[Color]]]:
    """Colors visible on `face` of `cube`, see Cube.face_grid."""
    return cube.face_grid(face)


def transform(cube: Cube, moves: list) -> Cube:
    """
    Apply a sequence of layer rotations to a cube.

    Args:
        cube (Cube): The cube to transform
        moves (list): List of tuples (axis, index[, turns])
                      e.g., [('y', 2, 1), ('x', 0, -1), ('z', 1)]

    Returns:
        Cube: The transformed cube

    Example:
        >>> c = create(3)
        >>> result = transform(c, [('y', 2), ('y', 2, 3)])
        >>> result == c
        True
    """
    # Check every move up front so a bad entry leaves nothing half-applied
    parsed = []
    for move in moves:
        if len(move) not in (2, 3):
            raise ValueError(f"Each move must be (axis, index) or (axis, index, turns), got {move!r}")
        turns = move[2] if len(move) == 3 else 1
        parsed.append(((move[0], move[1]), turns))

    result = cube.copy()
    for layer, turns in parsed:
        result.rotate(layer, turns)
    return result

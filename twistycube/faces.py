"""
The fixed catalog of axes, directions and the six canonical faces.
"""

import numpy as np
from enum import Enum
from typing import Dict, Optional, Tuple

from .exceptions import InvalidCycleError, InvalidFaceError, InvalidLayerError

# RGBA, one int per channel in [0, 255]
Color = Tuple[int, int, int, int]


class Axis(Enum):
    X = 0
    Y = 1
    Z = 2

    @classmethod
    def from_value(cls, value) -> 'Axis':
        """
        Resolve an axis from an Axis, its ordinal or its name.

        Args:
            value: An Axis, 0/1/2, or 'x'/'y'/'z' (any case)

        Returns:
            Axis: The matching axis

        Raises:
            InvalidLayerError: If the value names no axis
        """
        if isinstance(value, Axis):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                pass
        raise InvalidLayerError(
            f"Invalid axis '{value}'. Must be 'x', 'y', or 'z'", axis=value
        )


class Direction(Enum):
    NEGATIVE = -1
    POSITIVE = 1


class Face(Enum):
    """
    A canonical face of the whole cube.

    Ordinals follow L, R, D, U, B, F so a face's value doubles as its slot
    in a cubie's sticker list.
    """

    L = 0
    R = 1
    D = 2
    U = 3
    B = 4
    F = 5

    @property
    def axis(self) -> Axis:
        return FACE_CATALOG[self][0]

    @property
    def direction(self) -> Direction:
        return FACE_CATALOG[self][1]

    @property
    def color(self) -> Color:
        return FACE_CATALOG[self][2]

    @property
    def opposite(self) -> 'Face':
        flipped = Direction.POSITIVE if self.direction is Direction.NEGATIVE else Direction.NEGATIVE
        return face_for(self.axis, flipped)

    def boundary(self, size: int) -> int:
        """Coordinate along this face's axis of the layer that shows it."""
        return 0 if self.direction is Direction.NEGATIVE else size - 1

    @classmethod
    def from_value(cls, value) -> 'Face':
        """
        Resolve a face from a Face, its letter or its ordinal.

        Raises:
            InvalidFaceError: If the value is outside the catalog
        """
        if isinstance(value, Face):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                pass
        raise InvalidFaceError(
            f"Invalid face '{value}'. Must be one of L, R, D, U, B, F", face=value
        )


WHITE: Color = (255, 255, 255, 255)
YELLOW: Color = (255, 213, 0, 255)
RED: Color = (196, 30, 58, 255)
ORANGE: Color = (255, 88, 0, 255)
BLUE: Color = (0, 81, 186, 255)
GREEN: Color = (0, 158, 96, 255)

FACE_CATALOG: Dict[Face, Tuple[Axis, Direction, Color]] = {
    Face.L: (Axis.X, Direction.NEGATIVE, ORANGE),
    Face.R: (Axis.X, Direction.POSITIVE, RED),
    Face.D: (Axis.Y, Direction.NEGATIVE, YELLOW),
    Face.U: (Axis.Y, Direction.POSITIVE, WHITE),
    Face.B: (Axis.Z, Direction.NEGATIVE, BLUE),
    Face.F: (Axis.Z, Direction.POSITIVE, GREEN),
}


def face_for(axis: Axis, direction: Direction) -> Face:
    """Return the face lying on the given side of an axis."""
    for face, (face_axis, face_direction, _) in FACE_CATALOG.items():
        if face_axis is axis and face_direction is direction:
            return face
    raise InvalidFaceError(f"No face for {axis.name}/{direction.name}")


def validate_cycle(cycle) -> Tuple[Face, ...]:
    """
    Check that an orientation cycle is a permutation of 4 distinct faces.

    Args:
        cycle: Sequence of faces, read as "each receives the next one's sticker"

    Returns:
        Tuple[Face, ...]: The cycle as a tuple of Face

    Raises:
        InvalidCycleError: If the cycle repeats or omits faces
    """
    faces = tuple(Face.from_value(f) for f in cycle)
    if len(faces) != 4 or len(set(faces)) != 4:
        raise InvalidCycleError(
            f"Orientation cycle must hold 4 distinct faces, got {[f.name for f in faces]}",
            cycle=faces
        )
    return faces


# Per quarter turn: the first face receives the second's sticker, and so on.
# Each cycle matches the layer cell orderings in grid.layer_position.
AXIS_CYCLES: Dict[Axis, Tuple[Face, ...]] = {
    Axis.X: validate_cycle((Face.D, Face.B, Face.U, Face.F)),
    Axis.Y: validate_cycle((Face.B, Face.R, Face.F, Face.L)),
    Axis.Z: validate_cycle((Face.R, Face.U, Face.L, Face.D)),
}


def sticker_for(face: Face, position, size: int) -> Optional[Color]:
    """Initial sticker in slot `face` for a cubie starting at `position`."""
    if position[face.axis.value] == face.boundary(size):
        return face.color
    return None

"""
Core Cube class holding the state of an N x N x N twisty puzzle.
"""

import numpy as np
from typing import Iterator, List, Optional

from .config import settings
from .cubie import Cubie
from .exceptions import InvalidPositionError, InvalidSizeError
from .faces import Color, Face
from .grid import Position, index, layer_position, position
from .logging import get_logger
from .rotation import Layer, rotate_layer

logger = get_logger(__name__)


class Cube:
    """
    An N x N x N cube made of size**3 cubies.

    Attributes:
        size (int): Number of cubies along each edge
        cubies (List[Cubie]): Flat list, cubies[grid.index(c.position)] is c
    """

    def __init__(self, size: Optional[int] = None, cubies: Optional[List[Cubie]] = None):
        """
        Initialize a Cube.

        Args:
            size (int, optional): Size of the cube (default: settings.default_size)
            cubies (List[Cubie], optional): Existing cubie state to copy

        Raises:
            InvalidSizeError: If size is less than 1 or not an int
        """
        if size is None:
            size = settings.default_size
        if not isinstance(size, int) or isinstance(size, bool) or size < 1:
            logger.warning("Rejected cube size", size=size)
            raise InvalidSizeError(f"Cube size must be an integer of at least 1, got {size!r}", size=size)

        self.size = size

        if cubies is not None:
            if len(cubies) != size ** 3:
                raise InvalidSizeError(
                    f"Got {len(cubies)} cubies for cube size {size}, expected {size ** 3}", size=size
                )
            self.cubies = [c.copy() for c in cubies]
        else:
            self.cubies = [Cubie.solved(position(k, size), size) for k in range(size ** 3)]
            logger.debug("Cube created", size=size)

    def cubie_at(self, pos: Position) -> Cubie:
        """
        Get the cubie currently at a position.

        Args:
            pos: (x, y, z) coordinates in the cube

        Returns:
            Cubie: The cubie at that position

        Raises:
            InvalidPositionError: If any coordinate is not an int in [0, size)
        """
        try:
            coords = tuple(pos)
        except TypeError:
            coords = ()
        valid = len(coords) == 3 and all(
            isinstance(c, (int, np.integer)) and not isinstance(c, bool) and 0 <= c < self.size
            for c in coords
        )
        if not valid:
            logger.warning("Position out of range", position=repr(pos), size=self.size)
            raise InvalidPositionError(
                f"Position {pos!r} is out of bounds for cube size {self.size}", position=pos
            )
        return self.cubies[index(tuple(int(c) for c in coords), self.size)]

    def rotate(self, layer, turns: int = 1) -> 'Cube':
        """
        Rotate one layer of the cube in place.

        Args:
            layer: Layer or (axis, index) pair, e.g. ('y', 2)
            turns (int): Number of quarter turns (default: 1)

        Returns:
            Cube: self, to allow chaining
        """
        rotate_layer(self.cubies, self.size, layer, turns)
        return self

    def rotate_face(self, face, turns: int = 1) -> 'Cube':
        """Rotate the boundary layer showing `face`."""
        return self.rotate(Layer.for_face(face, self.size), turns)

    def face_grid(self, face) -> List[List[Optional[Color]]]:
        """
        Colors currently visible on a face.

        Args:
            face: Face, letter or ordinal

        Returns:
            size x size nested list; grid[i][j] is the color of layer cell (i, j)
        """
        face = Face.from_value(face)
        layer = Layer.for_face(face, self.size)
        return [
            [self.cubie_at(layer_position(layer.axis, layer.index, i, j)).color_at(face)
             for j in range(self.size)]
            for i in range(self.size)
        ]

    def is_solved(self) -> bool:
        """True when every visible face shows a single color."""
        for face in Face:
            colors = {c for row in self.face_grid(face) for c in row}
            if len(colors) != 1:
                return False
        return True

    def copy(self) -> 'Cube':
        """
        Create a deep copy of the cube.

        Returns:
            A new Cube instance with copied cubies
        """
        return Cube(self.size, self.cubies)

    def __iter__(self) -> Iterator[Cubie]:
        return iter(self.cubies)

    def __len__(self) -> int:
        return len(self.cubies)

    def __repr__(self) -> str:
        return f"Cube(size={self.size})"

    def __str__(self) -> str:
        lines = [f"Cube(size={self.size})"]
        for face in Face:
            grid = self.face_grid(face)
            rows = [" ".join(_color_code(c) for c in row) for row in grid]
            lines.append(f"{face.name}: " + " | ".join(rows))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cube):
            return False
        return self.size == other.size and self.cubies == other.cubies

    __hash__ = None


def _color_code(color: Optional[Color]) -> str:
    if color is None:
        return "."
    for face in Face:
        if face.color == color:
            return face.name
    return "?"

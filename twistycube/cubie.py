"""
A single sub-cube: its grid position and the stickers facing each face-slot.
"""

from typing import List, Optional, Sequence

from .faces import Color, Face, sticker_for
from .grid import Position


class Cubie:
    """
    One sub-cube of the puzzle.

    Attributes:
        position (Position): Current (x, y, z)
        home (Position): Position the cubie was created at
        stickers (List[Optional[Color]]): Color facing each slot, indexed by face ordinal
    """

    __slots__ = ("position", "home", "stickers")

    def __init__(self, position: Position, stickers: Sequence[Optional[Color]], home: Optional[Position] = None):
        if len(stickers) != len(Face):
            raise ValueError(f"A cubie needs {len(Face)} sticker slots, got {len(stickers)}")
        self.position = tuple(position)
        self.home = tuple(home) if home is not None else self.position
        self.stickers = list(stickers)

    @classmethod
    def solved(cls, position: Position, size: int) -> 'Cubie':
        """Create a cubie at `position` with the stickers of a solved cube."""
        return cls(position, [sticker_for(face, position, size) for face in Face])

    def color_at(self, face: Face) -> Optional[Color]:
        return self.stickers[face.value]

    def apply_orientation_cycle(self, cycle: Sequence[Face]):
        """
        Permute stickers along a cycle of faces.

        Each face in the cycle takes the old color of the next face; the last
        one takes the first's. Faces outside the cycle keep their sticker.

        Args:
            cycle: Ordered faces, e.g. (D, B, U, F)
        """
        old = list(self.stickers)
        for k, face in enumerate(cycle):
            successor = cycle[(k + 1) % len(cycle)]
            self.stickers[face.value] = old[successor.value]

    def relocate(self, position: Position):
        self.position = tuple(position)

    def colors(self) -> List[Color]:
        """Non-interior colors this cubie carries, sorted."""
        return sorted(c for c in self.stickers if c is not None)

    def is_home(self) -> bool:
        """True when the cubie sits at its starting position with every sticker in its official slot."""
        if self.position != self.home:
            return False
        return all(c is None or c == face.color for face, c in zip(Face, self.stickers))

    def copy(self) -> 'Cubie':
        return Cubie(self.position, self.stickers, self.home)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cubie):
            return NotImplemented
        return self.position == other.position and self.stickers == other.stickers

    __hash__ = None

    def __repr__(self) -> str:
        faces = "".join(face.name for face, c in zip(Face, self.stickers) if c is not None)
        return f"Cubie(position={self.position}, home={self.home}, faces={faces or '-'})"


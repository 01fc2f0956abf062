"""
Layer rotation: the coupled position and orientation permutation.
"""

import numpy as np
from typing import List, NamedTuple

from .config import settings
from .cubie import Cubie
from .exceptions import InvalidLayerError
from .faces import AXIS_CYCLES, Axis, Face
from .grid import layer_indices, layer_position
from .logging import get_logger

logger = get_logger(__name__)


class Layer(NamedTuple):
    """The slice of cubies whose coordinate along `axis` equals `index`."""

    axis: Axis
    index: int

    @classmethod
    def of(cls, value) -> 'Layer':
        """
        Build a layer from a Layer or an (axis, index) pair.

        The axis may be an Axis, its ordinal or 'x'/'y'/'z'.

        Raises:
            InvalidLayerError: If the selector cannot be read as a layer
        """
        if isinstance(value, Layer):
            value = (value.axis, value.index)
        try:
            axis, layer_index = value
        except (TypeError, ValueError):
            raise InvalidLayerError(f"Invalid layer selector {value!r}. Expected (axis, index)") from None
        if not isinstance(layer_index, (int, np.integer)) or isinstance(layer_index, bool):
            raise InvalidLayerError(
                f"Layer index must be an int, got {layer_index!r}", index=layer_index
            )
        return cls(Axis.from_value(axis), int(layer_index))

    @classmethod
    def for_face(cls, face, size: int) -> 'Layer':
        """The boundary layer that shows `face`."""
        face = Face.from_value(face)
        return cls(face.axis, face.boundary(size))

    def validate(self, size: int) -> 'Layer':
        if not 0 <= self.index < size:
            logger.warning("Layer index out of range", axis=self.axis.name, index=self.index, size=size)
            raise InvalidLayerError(
                f"Index {self.index} is out of bounds for cube size {size}",
                axis=self.axis, index=self.index
            )
        return self


def rotate_layer(cubies: List[Cubie], size: int, layer, turns: int = 1) -> List[Cubie]:
    """
    Rotate one layer of a flat cubie list by quarter turns, in place.

    Cell (i, j) of the layer receives the cubie previously at
    (size - 1 - j, i) on each quarter turn, and every moved cubie has the
    axis orientation cycle applied once per quarter turn.

    Args:
        cubies (List[Cubie]): Cubies indexed by grid.index(position)
        size (int): Cube size
        layer: Layer or (axis, index) pair
        turns (int): Quarter turns, taken modulo 4; negative turns go the other way

    Returns:
        List[Cubie]: The same list, with the layer permuted

    Raises:
        InvalidLayerError: If the layer index is outside [0, size)
        TypeError: If turns is not an int
    """
    layer = Layer.of(layer).validate(size)
    if not isinstance(turns, (int, np.integer)) or isinstance(turns, bool):
        raise TypeError(f"turns must be an int, got {type(turns).__name__}")

    quarter_turns = int(turns) % 4
    if quarter_turns == 0:
        return cubies

    source = layer_indices(layer.axis, layer.index, size)
    # rot90 with k=-1 puts source[size-1-j, i] at [i, j]
    rotated = np.rot90(source, k=-quarter_turns)
    cycle = AXIS_CYCLES[layer.axis]

    # Buffer the whole layer before committing
    moved = [cubies[src] for src in rotated.flat]
    for (i, j), cubie in zip(np.ndindex(size, size), moved):
        cubie.relocate(layer_position(layer.axis, layer.index, i, j))
        for _ in range(quarter_turns):
            cubie.apply_orientation_cycle(cycle)
    for dst, cubie in zip(source.flat, moved):
        cubies[dst] = cubie

    if settings.log_rotations:
        logger.debug("Layer rotated", axis=layer.axis.name, index=layer.index, turns=quarter_turns)
    return cubies

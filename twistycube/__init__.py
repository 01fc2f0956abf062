"""
twistycube
State model for N x N x N twisty cube puzzles: cubie positions, sticker
orientations and layer rotations.
"""

__version__ = "0.1.0"
__author__ = "Domingos97"

from .cube import Cube
from .cubie import Cubie
from .faces import Axis, Direction, Face, AXIS_CYCLES
from .rotation import Layer, rotate_layer
from .operations import create, rotate, face_grid, transform
from .utils import validate_size, is_solved, facelets
from .exceptions import (
    CubeError,
    InvalidSizeError,
    InvalidLayerError,
    InvalidFaceError,
    InvalidCycleError,
    InvalidPositionError,
)

__all__ = [
    "Cube",
    "Cubie",
    "Axis",
    "Direction",
    "Face",
    "AXIS_CYCLES",
    "Layer",
    "rotate_layer",
    "create",
    "rotate",
    "face_grid",
    "transform",
    "validate_size",
    "is_solved",
    "facelets",
    "CubeError",
    "InvalidSizeError",
    "InvalidLayerError",
    "InvalidFaceError",
    "InvalidCycleError",
    "InvalidPositionError",
]

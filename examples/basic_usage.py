"""
Basic usage examples for twistycube.
"""

from twistycube import Cube, Face, rotate, transform
from twistycube.utils import face_grids, facelets, get_layer


def example_basic_cube():
    """Create a cube and read its faces."""
    print("=== Basic Cube Example ===")

    # Create a 3x3x3 cube
    cube = Cube(3)
    print(f"Created cube: {cube!r}")
    print(f"Cube size: {cube.size}")
    print(f"Cubie count: {len(cube)}")
    print(f"Cubie at (0,0,0): {cube.cubie_at((0, 0, 0))}")
    print()


def example_rotations():
    """Demonstrate layer rotations."""
    print("=== Rotation Example ===")

    cube = Cube(3)
    print(f"Original cube:\n{cube}")

    # Turn the top layer (the one showing U) a quarter turn
    turned = rotate(cube, ('y', 2), 1)
    print(f"\nAfter turning the top layer:\n{turned}")

    # Same thing by face
    by_face = cube.copy().rotate_face(Face.U)
    print(f"\nSame as rotate_face(U): {by_face == turned}")

    # Four quarter turns bring the cube back
    back = rotate(turned, ('y', 2), 3)
    print(f"Back to start after 3 more turns: {back == cube}")
    print()


def example_transform():
    """Apply a sequence of moves and undo it."""
    print("=== Transform Example ===")

    cube = Cube(4)
    moves = [('x', 0, 1), ('y', 3, 2), ('z', 1, -1)]
    scrambled = transform(cube, moves)
    print(f"Solved after moves: {scrambled.is_solved()}")

    undo = [(axis, index, -turns) for axis, index, turns in reversed(moves)]
    restored = transform(scrambled, undo)
    print(f"Solved after undo: {restored.is_solved()}")
    print()


def example_snapshots():
    """Export state for a renderer."""
    print("=== Snapshot Example ===")

    cube = Cube(2).rotate(('z', 1), 1)
    for name, grid in face_grids(cube).items():
        print(f"{name}: {grid}")

    data = facelets(cube)
    print(f"\nFacelet array shape: {data.shape}, dtype: {data.dtype}")

    layer = get_layer(cube, ('z', 1))
    print(f"Front layer cubies: {[c.home for row in layer for c in row]}")
    print()


if __name__ == "__main__":
    example_basic_cube()
    example_rotations()
    example_transform()
    example_snapshots()

"""
Unit tests for the Cube class.
"""

import unittest
import numpy as np
from twistycube.config import settings
from twistycube.cube import Cube
from twistycube.exceptions import InvalidFaceError, InvalidPositionError, InvalidSizeError
from twistycube.faces import Face


def uniform(grid, color):
    return all(c == color for row in grid for c in row)


class TestCube(unittest.TestCase):
    """Test cases for the Cube class."""

    def test_cube_initialization(self):
        """Test basic cube initialization."""
        cube = Cube(3)
        self.assertEqual(cube.size, 3)
        self.assertEqual(len(cube), 27)
        self.assertTrue(cube.is_solved())

    def test_default_size(self):
        """Test the configured default size."""
        self.assertEqual(Cube().size, settings.default_size)

    def test_invalid_size(self):
        """Test that invalid sizes raise InvalidSizeError."""
        for bad in (0, -1, 2.5, "3", True):
            with self.assertRaises(InvalidSizeError):
                Cube(bad)

    def test_invalid_size_is_value_error(self):
        """Test that size errors are also ValueErrors."""
        with self.assertRaises(ValueError):
            Cube(0)

    def test_invalid_size_logged(self):
        """Test that a rejected size is logged as a warning."""
        with self.assertLogs("twistycube", level="WARNING") as cm:
            with self.assertRaises(InvalidSizeError):
                Cube(0)
        self.assertTrue(any("Rejected cube size" in line for line in cm.output))

    def test_mismatched_cubies(self):
        """Test that the wrong number of cubies raises InvalidSizeError."""
        with self.assertRaises(InvalidSizeError):
            Cube(3, Cube(2).cubies)

    def test_cubie_at(self):
        """Test looking up cubies by position."""
        cube = Cube(3)
        self.assertEqual(cube.cubie_at((2, 1, 0)).position, (2, 1, 0))
        self.assertEqual(cube.cubie_at((np.int64(1), 0, 2)).position, (1, 0, 2))

    def test_cubie_at_out_of_range(self):
        """Test that positions outside the grid raise InvalidPositionError."""
        cube = Cube(3)
        for bad in ((3, 0, 0), (-1, 0, 0), (0, 0, 3), (0, 0), (0, 1.0, 0), None):
            with self.assertRaises(InvalidPositionError):
                cube.cubie_at(bad)

    def test_cubie_at_out_of_range_logged(self):
        """Test that a rejected position is logged as a warning."""
        with self.assertLogs("twistycube", level="WARNING") as cm:
            with self.assertRaises(InvalidPositionError):
                Cube(3).cubie_at((3, 0, 0))
        self.assertTrue(any("Position out of range" in line for line in cm.output))

    def test_initial_face_grids(self):
        """Test a fresh cube shows official colors on every face."""
        for size in (1, 2, 3, 4):
            cube = Cube(size)
            for face in Face:
                grid = cube.face_grid(face)
                self.assertEqual(len(grid), size)
                self.assertEqual(len(grid[0]), size)
                self.assertTrue(uniform(grid, face.color))

    def test_face_grid_accepts_letters(self):
        """Test faces may be given by letter."""
        cube = Cube(2)
        self.assertEqual(cube.face_grid("U"), cube.face_grid(Face.U))
        with self.assertRaises(InvalidFaceError):
            cube.face_grid("Q")

    def test_face_grid_is_read_only(self):
        """Test reading faces does not mutate the cube."""
        cube = Cube(3).rotate(("x", 0), 1)
        before = cube.copy()
        for face in Face:
            cube.face_grid(face)
        self.assertEqual(cube, before)

    def test_top_layer_turn_handedness(self):
        """Test turning the U layer moves each side's top row to the next side."""
        cube = Cube(3)
        cube.rotate(("y", 2), 1)
        self.assertTrue(uniform(cube.face_grid(Face.U), Face.U.color))
        self.assertTrue(uniform(cube.face_grid(Face.D), Face.D.color))

        r, f = cube.face_grid(Face.R), cube.face_grid(Face.F)
        b, l = cube.face_grid(Face.B), cube.face_grid(Face.L)
        # R and L cells are (y, z); F and B cells are (x, y)
        for k in range(3):
            self.assertEqual(r[2][k], Face.F.color)
            self.assertEqual(f[k][2], Face.L.color)
            self.assertEqual(l[2][k], Face.B.color)
            self.assertEqual(b[k][2], Face.R.color)
            for lower in (0, 1):
                self.assertEqual(r[lower][k], Face.R.color)
                self.assertEqual(f[k][lower], Face.F.color)

    def test_top_layer_turn_cell_mapping(self):
        """Test the exact cell mapping of a U layer turn on a mixed cube."""
        cube = Cube(3).rotate(("x", 0), 1).rotate(("z", 2), -1).rotate(("x", 2), 2)
        f_old, l_old = cube.face_grid(Face.F), cube.face_grid(Face.L)
        b_old, r_old = cube.face_grid(Face.B), cube.face_grid(Face.R)
        cube.rotate(("y", 2), 1)
        r, f = cube.face_grid(Face.R), cube.face_grid(Face.F)
        l, b = cube.face_grid(Face.L), cube.face_grid(Face.B)
        for k in range(3):
            self.assertEqual(r[2][k], f_old[2 - k][2])
            self.assertEqual(f[k][2], l_old[2][k])
            self.assertEqual(l[2][k], b_old[2 - k][2])
            self.assertEqual(b[k][2], r_old[2][k])

    def test_four_top_turns_restore_faces(self):
        """Test four U layer turns restore every face grid."""
        cube = Cube(3)
        original = {face: cube.face_grid(face) for face in Face}
        for _ in range(4):
            cube.rotate(("y", 2), 1)
        for face in Face:
            self.assertEqual(cube.face_grid(face), original[face])
        self.assertEqual(cube, Cube(3))

    def test_two_by_two_scenario(self):
        """Test one quarter turn of the top layer of a 2x2x2 and its undoing."""
        cube = Cube(2)
        start = cube.copy()
        before = {face: cube.face_grid(face) for face in Face}

        cube.rotate(("y", 1), 1)
        self.assertEqual(cube.face_grid(Face.U), before[Face.U])
        self.assertEqual(cube.face_grid(Face.D), before[Face.D])
        after = {face: cube.face_grid(face) for face in Face}
        for k in range(2):
            self.assertEqual(after[Face.R][1][k], before[Face.F][1 - k][1])
            self.assertEqual(after[Face.F][k][1], before[Face.L][1][k])
            self.assertEqual(after[Face.L][1][k], before[Face.B][1 - k][1])
            self.assertEqual(after[Face.B][k][1], before[Face.R][1][k])
            # Bottom rows stay put
            self.assertEqual(after[Face.R][0][k], before[Face.R][0][k])
            self.assertEqual(after[Face.F][k][0], before[Face.F][k][0])

        for _ in range(3):
            cube.rotate(("y", 1), 1)
        self.assertEqual(cube, start)

    def test_rotate_face(self):
        """Test rotating by face matches rotating its boundary layer."""
        self.assertEqual(Cube(3).rotate_face("U"), Cube(3).rotate(("y", 2)))
        self.assertEqual(Cube(4).rotate_face(Face.L, 2), Cube(4).rotate(("x", 0), 2))

    def test_is_solved(self):
        """Test solved detection after a turn and its inverse."""
        cube = Cube(3).rotate(("z", 1), 1)
        self.assertFalse(cube.is_solved())
        cube.rotate(("z", 1), -1)
        self.assertTrue(cube.is_solved())

    def test_copy(self):
        """Test cube copying."""
        cube1 = Cube(3)
        cube2 = cube1.copy()
        self.assertEqual(cube1, cube2)

        # Modifying copy shouldn't affect original
        cube2.rotate(("x", 0), 1)
        self.assertNotEqual(cube1, cube2)
        self.assertTrue(cube1.is_solved())

    def test_equality(self):
        """Test cube equality."""
        self.assertEqual(Cube(3), Cube(3))
        self.assertNotEqual(Cube(2), Cube(3))
        self.assertNotEqual(Cube(3), "cube")

    def test_repr(self):
        """Test string representation."""
        cube = Cube(3)
        self.assertIn("Cube(size=3)", repr(cube))

    def test_str(self):
        """Test detailed string representation."""
        string = str(Cube(2))
        self.assertIn("Cube(size=2)", string)
        self.assertIn("U: U U | U U", string)


if __name__ == '__main__':
    unittest.main()

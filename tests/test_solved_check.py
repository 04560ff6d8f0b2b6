import unittest
from dataclasses import replace

from rubik_engine.cubie import solved_cubies
from rubik_engine.faces import Color, Face
from rubik_engine.moves import Move
from rubik_engine.rotation import apply_moves
from rubik_engine.solved_check import is_solved, validate_cube
from rubik_engine.state_codec import CubeInvariantError, face_grid


class TestSolvedCheck(unittest.TestCase):
    def test_solved_state_is_true(self):
        self.assertTrue(is_solved(solved_cubies()))

    def test_whole_cube_turn_is_still_solved(self):
        # All three Y layers turned together rotate the cube as a whole.
        cubies = apply_moves(solved_cubies(), [Move(Face.TOP, layer, True) for layer in (-1, 0, 1)])
        self.assertTrue(is_solved(cubies))
        self.assertEqual(face_grid(cubies, Face.FRONT).tolist(), [[int(Color.RED)] * 3] * 3)

    def test_corrupted_state_is_false(self):
        cubies = solved_cubies()
        corner = cubies[26]
        colors = list(corner.colors)
        colors[Face.TOP], colors[Face.FRONT] = colors[Face.FRONT], colors[Face.TOP]
        cubies[26] = replace(corner, colors=tuple(colors))
        self.assertFalse(is_solved(cubies))
        # Counts are still right, so the cube stays structurally valid.
        validate_cube(cubies)


class TestValidateCube(unittest.TestCase):
    def test_duplicated_sticker_is_rejected(self):
        cubies = solved_cubies()
        corner = cubies[26]
        colors = list(corner.colors)
        colors[Face.TOP] = Color.RED
        cubies[26] = replace(corner, colors=tuple(colors))
        with self.assertRaises(CubeInvariantError):
            validate_cube(cubies)

    def test_sticker_on_hidden_face_is_rejected(self):
        cubies = solved_cubies()
        core = cubies[13]
        colors = list(core.colors)
        colors[Face.TOP] = Color.WHITE
        cubies[13] = replace(core, colors=tuple(colors))
        with self.assertRaises(CubeInvariantError):
            validate_cube(cubies)

    def test_duplicate_position_is_rejected(self):
        cubies = solved_cubies()
        cubies[0] = replace(cubies[0], position=cubies[1].position)
        with self.assertRaises(CubeInvariantError):
            validate_cube(cubies)

    def test_wrong_cubie_count_is_rejected(self):
        with self.assertRaises(CubeInvariantError):
            validate_cube(solved_cubies()[:-1])


if __name__ == "__main__":
    unittest.main()

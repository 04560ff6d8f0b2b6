import unittest

import numpy as np

from rubik_engine.faces import Axis, Face
from rubik_engine.moves import Move, make_move, outer_move, random_moves
from rubik_engine.state_codec import MoveValidationError


class TestMoves(unittest.TestCase):
    def test_make_move_accepts_enum_index_and_name(self):
        expected = Move(Face.BOTTOM, -1, False)
        self.assertEqual(make_move(Face.BOTTOM, -1, False), expected)
        self.assertEqual(make_move(3, -1, False), expected)
        self.assertEqual(make_move(" bottom ", np.int64(-1), np.bool_(False)), expected)

    def test_any_layer_on_the_axis_is_valid(self):
        for layer in (-1, 0, 1):
            self.assertEqual(make_move(Face.RIGHT, layer, True).layer, layer)

    def test_rejects_bad_arguments(self):
        for args in [(Face.RIGHT, 2, True), (Face.RIGHT, 0.5, True), (6, 0, True), (True, 0, True), (Face.TOP, 0, 1)]:
            with self.assertRaises(MoveValidationError, msg=str(args)):
                make_move(*args)

    def test_axis_and_perceived_sense(self):
        self.assertEqual(Move(Face.FRONT, 1, True).axis, Axis.Z)
        self.assertTrue(Move(Face.FRONT, 1, True).axis_clockwise)
        for face in (Face.LEFT, Face.BOTTOM, Face.BACK):
            self.assertFalse(Move(face, 0, True).axis_clockwise)
            self.assertTrue(Move(face, 0, False).axis_clockwise)

    def test_inverse_flips_direction_only(self):
        m = Move(Face.TOP, 0, True)
        self.assertEqual(m.inverse(), Move(Face.TOP, 0, False))
        self.assertEqual(m.inverse().inverse(), m)

    def test_label(self):
        self.assertEqual(outer_move(Face.BACK, False).label, "face=BACK layer=-1 dir=CCW")

    def test_random_moves_cover_faces_and_directions(self):
        moves = random_moves(600, np.random.default_rng(0))
        self.assertEqual({m.face for m in moves}, set(Face))
        self.assertEqual({m.clockwise for m in moves}, {True, False})
        self.assertTrue(all(m == outer_move(m.face, m.clockwise) for m in moves))
        self.assertEqual(random_moves(0, np.random.default_rng(0)), [])


if __name__ == "__main__":
    unittest.main()

# tests/test_board.py

import random
import unittest

import numpy as np

from backend.board import MinesweeperBoard
from backend.levels import BEGINNER, EXPERT, INTERMEDIATE, Level
from backend.utils import mine_mask, neighbor_mine_counts


def revealed_cells(board):
    return {
        (r, c)
        for r in range(board.rows)
        for c in range(board.cols)
        if board.cells[r][c].revealed
    }


class TestBoardGeneration(unittest.TestCase):

    def test_board_dimensions(self):
        board = MinesweeperBoard.generate(Level(4, 5, 3))
        self.assertEqual(len(board.cells), 4)
        self.assertEqual(len(board.cells[0]), 5)

    def test_new_board_is_hidden_and_unflagged(self):
        board = MinesweeperBoard.generate(BEGINNER, random.Random(1))
        for row in board.cells:
            for cell in row:
                self.assertFalse(cell.revealed)
                self.assertFalse(cell.flagged)

    def test_presets_have_exact_mine_count_and_counts(self):
        for seed, level in enumerate((BEGINNER, INTERMEDIATE, EXPERT)):
            board = MinesweeperBoard.generate(level, random.Random(seed))
            mines = board.mine_positions()
            self.assertEqual(len(mines), level.mine_count)

            expected = neighbor_mine_counts(mine_mask(level.rows, level.cols, mines))
            np.testing.assert_array_equal(np.array(board.values), expected)

    def test_nearly_full_board(self):
        board = MinesweeperBoard.generate(Level(3, 3, 8), random.Random(7))
        self.assertEqual(len(board.mine_positions()), 8)
        free = [(r, c) for r in range(3) for c in range(3) if not board.cells[r][c].is_mine]
        self.assertEqual(len(free), 1)
        r, c = free[0]
        self.assertEqual(board.cells[r][c].value, len(board.neighbors(r, c)))

    def test_same_seed_same_board(self):
        first = MinesweeperBoard.generate(EXPERT, random.Random(42))
        second = MinesweeperBoard.generate(EXPERT, random.Random(42))
        self.assertEqual(first.values, second.values)

    def test_from_layout_matches_generated_counts(self):
        generated = MinesweeperBoard.generate(INTERMEDIATE, random.Random(3))
        rebuilt = MinesweeperBoard.from_layout(INTERMEDIATE, generated.mine_positions())
        self.assertEqual(rebuilt.values, generated.values)

    def test_from_layout_rejects_wrong_mine_count(self):
        with self.assertRaises(ValueError):
            MinesweeperBoard.from_layout(Level(3, 3, 2), [(0, 0)])

    def test_from_layout_rejects_mine_off_board(self):
        with self.assertRaises(ValueError):
            MinesweeperBoard.from_layout(Level(3, 3, 1), [(3, 0)])


class TestReveal(unittest.TestCase):

    def test_reveal_number_reveals_only_that_cell(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        self.assertFalse(board.reveal(1, 1))
        self.assertEqual(revealed_cells(board), {(1, 1)})

    def test_cascade_from_far_corner(self):
        board = MinesweeperBoard.from_layout(Level(8, 8, 1, "Beginner"), [(0, 0)])
        self.assertFalse(board.reveal(7, 7))

        all_cells = {(r, c) for r in range(8) for c in range(8)}
        self.assertEqual(revealed_cells(board), all_cells - {(0, 0)})
        for r, c in [(0, 1), (1, 0), (1, 1)]:
            self.assertEqual(board.cells[r][c].value, 1)
        self.assertFalse(board.cells[0][0].revealed)

    def test_cascade_stops_at_numbered_boundary(self):
        # A wall of mines down the middle column splits the board in two.
        board = MinesweeperBoard.from_layout(Level(3, 5, 3), [(0, 2), (1, 2), (2, 2)])
        board.reveal(0, 0)

        self.assertEqual(
            revealed_cells(board),
            {(r, c) for r in range(3) for c in range(2)},
        )
        self.assertEqual([board.cells[r][1].value for r in range(3)], [2, 3, 2])

    def test_cascade_grows_revealed_set_and_skips_mines(self):
        board = MinesweeperBoard.generate(EXPERT, random.Random(11))
        zero = next(
            (r, c)
            for r in range(board.rows)
            for c in range(board.cols)
            if board.cells[r][c].value == 0
        )
        before = len(revealed_cells(board))
        board.reveal(*zero)

        self.assertGreater(len(revealed_cells(board)), before + 1)
        for r, c in board.mine_positions():
            self.assertFalse(board.cells[r][c].revealed)

    def test_cascade_leaves_flagged_cells_closed(self):
        board = MinesweeperBoard.from_layout(Level(5, 5, 1), [(4, 4)])
        board.toggle_flag(0, 4)
        board.reveal(0, 0)

        self.assertFalse(board.cells[0][4].revealed)
        self.assertTrue(board.cells[0][4].flagged)
        self.assertTrue(board.cells[1][4].revealed)

    def test_reveal_mine_returns_true(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        self.assertTrue(board.reveal(0, 0))
        self.assertTrue(board.cells[0][0].revealed)

    def test_reveal_out_of_bounds_is_noop(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        self.assertFalse(board.reveal(-1, 0))
        self.assertFalse(board.reveal(0, 100))
        self.assertEqual(revealed_cells(board), set())

    def test_reveal_flagged_cell_is_noop(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        board.toggle_flag(0, 0)
        self.assertFalse(board.reveal(0, 0))
        self.assertFalse(board.cells[0][0].revealed)

    def test_reveal_twice_is_noop(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        board.reveal(1, 1)
        self.assertFalse(board.reveal(1, 1))
        self.assertEqual(revealed_cells(board), {(1, 1)})


class TestFlag(unittest.TestCase):

    def test_flag_twice_restores(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        self.assertTrue(board.toggle_flag(2, 2))
        self.assertTrue(board.cells[2][2].flagged)
        self.assertTrue(board.toggle_flag(2, 2))
        self.assertFalse(board.cells[2][2].flagged)

    def test_flag_revealed_cell_is_noop(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        board.reveal(1, 1)
        self.assertFalse(board.toggle_flag(1, 1))
        self.assertFalse(board.cells[1][1].flagged)

    def test_flag_out_of_bounds_is_noop(self):
        board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        self.assertFalse(board.toggle_flag(5, 5))
        self.assertEqual(board.flag_count(), 0)


class TestChord(unittest.TestCase):

    def setUp(self):
        self.board = MinesweeperBoard.from_layout(Level(3, 3, 1), [(0, 0)])
        self.board.reveal(1, 1)

    def test_chord_without_enough_flags_is_noop(self):
        self.assertFalse(self.board.chord(1, 1))
        self.assertEqual(revealed_cells(self.board), {(1, 1)})

    def test_chord_with_matching_flags_reveals_neighbors(self):
        self.board.toggle_flag(0, 0)
        self.assertFalse(self.board.chord(1, 1))

        all_cells = {(r, c) for r in range(3) for c in range(3)}
        self.assertEqual(revealed_cells(self.board), all_cells - {(0, 0)})
        self.assertTrue(self.board.is_complete())

    def test_chord_with_too_many_flags_is_noop(self):
        self.board.toggle_flag(0, 0)
        self.board.toggle_flag(0, 1)
        self.assertFalse(self.board.chord(1, 1))
        self.assertEqual(revealed_cells(self.board), {(1, 1)})

    def test_chord_with_wrong_flag_hits_mine(self):
        self.board.toggle_flag(0, 1)
        self.assertTrue(self.board.chord(1, 1))
        self.assertTrue(self.board.cells[0][0].revealed)
        self.assertFalse(self.board.cells[0][1].revealed)

    def test_chord_on_hidden_cell_is_noop(self):
        self.assertFalse(self.board.chord(2, 2))
        self.assertEqual(revealed_cells(self.board), {(1, 1)})


class TestBoardText(unittest.TestCase):

    def test_str_shows_hidden_revealed_and_flags(self):
        board = MinesweeperBoard.from_layout(Level(2, 2, 1), [(0, 0)])
        board.reveal(1, 1)
        board.toggle_flag(0, 0)
        self.assertEqual(str(board), " F  . \n .  1 ")


if __name__ == "__main__":
    unittest.main()

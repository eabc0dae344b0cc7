import io
import unittest

from gamma import create, read_lines, run, run_interactive, busy_fields


def run_text(text):
    out, err = io.StringIO(), io.StringIO()
    code = run(io.StringIO(text), out, err)
    return code, out.getvalue(), err.getvalue()


class TestInteractiveMode(unittest.TestCase):
    def test_given_single_player_when_board_fills_then_game_ends_with_summary(self):
        code, out, err = run_text('I 1 1 1 1\n0 0\n')
        self.assertEqual(code, 0)
        self.assertEqual(err, '')
        self.assertNotIn('OK', out)
        self.assertIn('PLAYER 1 BUSY_FIELDS 0 FREE_FIELDS 1', out)
        self.assertTrue(out.endswith('1\nPLAYER 1 OWNED_FIELDS 1\n'))

    def test_given_bad_entries_when_prompted_then_same_player_reprompted(self):
        code, out, _ = run_text('I 2 1 1 1\n5 5\nfoo\n0 0\n1 0\n')
        self.assertEqual(code, 0)
        self.assertIn('Illegal move. Try again.', out)
        self.assertIn('Could not parse. Try again.', out)
        self.assertTrue(out.endswith('11\nPLAYER 1 OWNED_FIELDS 2\n'))

    def test_given_non_ascii_digits_when_prompted_then_reprompted_instead_of_crashing(self):
        code, out, _ = run_text('I 3 3 2 2\n² 1\ng 1 ٣\nq\n')
        self.assertEqual(code, 0)
        self.assertEqual(out.count('Could not parse. Try again.'), 2)
        self.assertIn('PLAYER 1 OWNED_FIELDS 0\nPLAYER 2 OWNED_FIELDS 0\n', out)

    def test_given_golden_move_entry_when_prompted_then_capture_applied(self):
        code, out, _ = run_text('I 2 1 2 1\n0 0\n1 0\ng 1 0\n')
        self.assertEqual(code, 0)
        # Player 1 still has its golden move after both cells are taken.
        self.assertIn('PLAYER 1 BUSY_FIELDS 1 FREE_FIELDS 0 GOLDEN_MOVE_AVAILABLE', out)
        self.assertTrue(out.endswith('11\nPLAYER 1 OWNED_FIELDS 2\nPLAYER 2 OWNED_FIELDS 0\n'))

    def test_given_quit_entry_when_prompted_then_game_ends_immediately(self):
        code, out, _ = run_text('I 3 3 2 2\n0 0\nq\n1 1\n')
        self.assertEqual(code, 0)
        self.assertIn('PLAYER 1 OWNED_FIELDS 1\nPLAYER 2 OWNED_FIELDS 0\n', out)

    def test_given_pass_entries_when_prompted_then_turn_moves_on(self):
        state = create(2, 1, 2, 1)
        out = io.StringIO()
        lines = read_lines(io.StringIO('c\n0 0\n\n'))
        self.assertEqual(run_interactive(state, lines, out), 0)
        self.assertEqual(busy_fields(state, 1), 0)
        self.assertEqual(busy_fields(state, 2), 1)
        self.assertEqual(state.board.at(0, 0), 2)


if __name__ == '__main__':
    unittest.main(verbosity=2)

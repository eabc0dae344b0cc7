import dataclasses
import random
import unittest

from gamma import (
    create,
    move,
    golden_move,
    busy_fields,
    count_components,
    players,
    width,
    height,
)


def snapshot(state):
    return (
        list(state.board.cells),
        [dataclasses.astuple(s) for s in state.stats],
        state.all_free_fields,
    )


class TestRandomPlayInvariants(unittest.TestCase):
    def _assert_consistent(self, state):
        n = players(state)
        total_busy = sum(busy_fields(state, p) for p in range(1, n + 1))
        self.assertEqual(total_busy + state.all_free_fields, width(state) * height(state))
        for p in range(1, n + 1):
            self.assertEqual(state.areas(p), count_components(state.board, p))
            self.assertLessEqual(state.areas(p), state.max_areas)
            self.assertEqual(busy_fields(state, p), state.board.cells.count(p))

    def test_given_seeded_random_games_when_playing_then_invariants_hold_after_every_call(self):
        rng = random.Random(1234)
        for _ in range(40):
            w, h = rng.randint(1, 6), rng.randint(1, 6)
            n, limit = rng.randint(1, 4), rng.randint(1, 3)
            state = create(w, h, n, limit)
            used = {p: False for p in range(1, n + 1)}
            for _ in range(80):
                player = rng.randint(0, n + 1)
                x, y = rng.randint(-1, w), rng.randint(-1, h)
                before = snapshot(state)
                if rng.random() < 0.2:
                    ok = golden_move(state, player, x, y)
                    if ok:
                        self.assertFalse(used[player])
                        used[player] = True
                else:
                    ok = move(state, player, x, y)
                if not ok:
                    self.assertEqual(snapshot(state), before)
                for p, flag in used.items():
                    self.assertEqual(state.player(p).golden_move_used, flag)
                self._assert_consistent(state)


if __name__ == '__main__':
    unittest.main(verbosity=2)

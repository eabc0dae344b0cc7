import argparse
import random
import sys
sys.path.append('.')
import gamma  # type: ignore


def check_state(state) -> list:
    """Returns a list of human-readable invariant violations (empty when consistent)."""
    problems = []
    total_busy = sum(gamma.busy_fields(state, p) for p in range(1, gamma.players(state) + 1))
    cells = gamma.width(state) * gamma.height(state)
    if total_busy + state.all_free_fields != cells:
        problems.append(f"busy={total_busy} free={state.all_free_fields} cells={cells}")
    for p in range(1, gamma.players(state) + 1):
        actual = gamma.count_components(state.board, p)
        if state.areas(p) != actual:
            problems.append(f"player {p}: areas={state.areas(p)} components={actual}")
        if state.areas(p) > state.max_areas:
            problems.append(f"player {p}: areas={state.areas(p)} over limit {state.max_areas}")
    return problems


def play_random_game(rng: random.Random, steps: int):
    w = rng.randint(1, 8)
    h = rng.randint(1, 8)
    n = rng.randint(1, 12)
    a = rng.randint(1, 4)
    state = gamma.create(w, h, n, a)
    for _ in range(steps):
        player = rng.randint(1, n)
        x = rng.randrange(w)
        y = rng.randrange(h)
        if rng.random() < 0.1:
            gamma.golden_move(state, player, x, y)
        else:
            gamma.move(state, player, x, y)
        problems = check_state(state)
        if problems:
            return state, problems
    return state, []


def main():
    parser = argparse.ArgumentParser(description='Play seeded random games and cross-check engine invariants')
    parser.add_argument('--games', type=int, default=200)
    parser.add_argument('--steps', type=int, default=150)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    failures = 0
    for i in range(args.games):
        state, problems = play_random_game(rng, args.steps)
        if problems:
            failures += 1
            print(f"game {i}: {len(problems)} problem(s)")
            for p in problems:
                print(f"  {p}")
            print(gamma.render(state))
    print(f"Checked {args.games} games, failures={failures}")
    sys.exit(1 if failures else 0)


if __name__ == '__main__':
    main()

"""Solve a full Hot Springs puzzle input.

Reads one row per line from the given file (default
``res/day-12-input.txt``) and prints the sum of arrangements for the
rows as given and for the rows unfolded five times.

Run:
    python examples/solve_input.py [path/to/input.txt]
"""

import pathlib
import sys
import time

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

import count_arrangements
import hot_springs

_C = hot_springs._Colors

DEFAULT_INPUT_PATH = pathlib.Path("res/day-12-input.txt")


def main() -> None:
    path = DEFAULT_INPUT_PATH
    if len(sys.argv) > 1:
        path = pathlib.Path(sys.argv[1])
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"{_C.RED}Failed to read {path}: {e}{_C.RESET}")
        sys.exit(1)

    t0 = time.perf_counter()
    try:
        answers = count_arrangements.solve_puzzle(text, show_progress=True)
    except hot_springs.MalformedRowError as e:
        print(f"{_C.RED}Malformed input in {path}: {e}{_C.RESET}")
        sys.exit(1)
    elapsed = time.perf_counter() - t0

    print()
    count_arrangements.print_puzzle_answers(answers)
    print(f"{_C.DIM}Finished in {elapsed:.2f}s{_C.RESET}")


if __name__ == "__main__":
    main()

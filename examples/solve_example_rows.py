"""Arrangement analysis for the six canonical example rows.

Prints each example row with its arrangement count, both as given and
unfolded, followed by the two puzzle answers (21 and 525152).

Run:
    python examples/solve_example_rows.py
"""

import pathlib
import sys
import time

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

import count_arrangements
import hot_springs

_C = hot_springs._Colors

EXAMPLE_INPUT = """\
???.### 1,1,3
.??..??...?##. 1,1,3
?#?#?#?#?#?#?#? 1,3,1,6
????.#...#... 4,1,1
????.######..#####. 1,6,5
?###???????? 3,2,1
"""


def main() -> None:
    print(f"{_C.BOLD}{'=' * 60}{_C.RESET}")
    print(f"{_C.BOLD}HOT SPRINGS EXAMPLE ROWS{_C.RESET}")
    print(f"{_C.BOLD}{'=' * 60}{_C.RESET}")
    print()

    rows = hot_springs.parse_input(EXAMPLE_INPUT)
    count_arrangements.print_row_analysis(rows)
    print()

    t0 = time.perf_counter()
    answers = count_arrangements.solve_puzzle(EXAMPLE_INPUT)
    elapsed = time.perf_counter() - t0

    count_arrangements.print_puzzle_answers(answers)
    print(f"  {_C.DIM}Computed in {elapsed:.3f}s{_C.RESET}")


if __name__ == "__main__":
    main()

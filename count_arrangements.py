"""Arrangement counting engine for Hot Springs.

Counts the ways the unknown springs of a row can be resolved so that the
contiguous damaged groups match the row's damaged counts exactly, and
sums those counts over a whole puzzle input.

Architecture:
    count_arrangements() builds a backward table over (spring position,
    next damaged group) once per row. Each entry depends only on entries
    to its right, so the whole table is filled in a single right-to-left
    pass in O(springs x groups) time. The table is local to the call.
"""

from __future__ import annotations

import dataclasses
import itertools
from collections.abc import Iterable

import tqdm

import hot_springs

_C = hot_springs._Colors
_OPERATIONAL = hot_springs.Condition.OPERATIONAL
_DAMAGED = hot_springs.Condition.DAMAGED
_UNKNOWN = hot_springs.Condition.UNKNOWN

# Number of copies in the extended puzzle's unfolded rows.
UNFOLD_FACTOR = 5

# The brute-force reference counter visits 2**unknowns assignments.
# 20 unknowns is about a million resolved rows.
BRUTE_FORCE_UNKNOWN_LIMIT = 20


# =============================================================================
# Exact Counter
# =============================================================================

def _damageable_runs(cells: tuple[hot_springs.Condition, ...]) -> list[int]:
    """For each position, how many springs from there on could be damaged.

    ``runs[i]`` is the largest k such that springs i..i+k-1 are all
    damaged or unknown. Has one extra trailing entry of 0.
    """
    runs = [0] * (len(cells) + 1)
    for i in range(len(cells) - 1, -1, -1):
        if cells[i] != _OPERATIONAL:
            runs[i] = runs[i + 1] + 1
    return runs


def count_arrangements(row: hot_springs.ConditionRow) -> int:
    """Count the valid arrangements of a row.

    An arrangement assigns operational or damaged to every unknown
    spring. It is valid when the contiguous damaged groups of the
    resulting row equal ``row.damaged_counts``. A row without unknown
    springs therefore counts 1 if it already matches and 0 otherwise.

    ``ways[i][j]`` holds the number of valid completions of springs
    ``i..`` given that groups ``j..`` are still to be placed. A damaged
    group is always placed whole, together with the operational spring
    that must follow it, so the count never double-counts a group.

    Args:
        row: The row to count.

    Returns:
        The number of valid arrangements. 0 if none exist.
    """
    cells = row.cells()
    groups = row.damaged_counts
    n = len(cells)
    m = len(groups)
    damageable = _damageable_runs(cells)

    # Two rows past the end: a group that finishes on the last spring
    # jumps over its (absent) trailing separator to n + 1.
    ways = [[0] * (m + 1) for _ in range(n + 2)]
    ways[n][m] = 1
    ways[n + 1][m] = 1

    for i in range(n - 1, -1, -1):
        cell = cells[i]
        current = ways[i]
        after = ways[i + 1]
        for j in range(m + 1):
            total = 0
            if cell != _DAMAGED:
                total += after[j]
            if cell != _OPERATIONAL and j < m:
                size = groups[j]
                end = i + size
                if damageable[i] >= size and (
                    end == n or cells[end] != _DAMAGED
                ):
                    total += ways[end + 1][j + 1]
            current[j] = total

    return ways[0][0]


def count_unfolded_arrangements(
    row: hot_springs.ConditionRow, factor: int = UNFOLD_FACTOR,
) -> int:
    """Count the valid arrangements of the row unfolded ``factor`` times."""
    return count_arrangements(hot_springs.unfold(row, factor))


# =============================================================================
# Brute-Force Reference Counter
# =============================================================================

def count_arrangements_brute_force(row: hot_springs.ConditionRow) -> int:
    """Count valid arrangements by trying every assignment.

    Resolves the unknown springs in every possible way and validates
    each resolved row. Exponential in the number of unknown springs, so
    only suitable for checking ``count_arrangements`` on small rows.

    Args:
        row: The row to count.

    Returns:
        The number of valid arrangements.

    Raises:
        ValueError: If the row has more than ``BRUTE_FORCE_UNKNOWN_LIMIT``
            unknown springs.
    """
    if row.unknown_count > BRUTE_FORCE_UNKNOWN_LIMIT:
        raise ValueError(
            f"Row has {row.unknown_count} unknown springs; brute force "
            f"is limited to {BRUTE_FORCE_UNKNOWN_LIMIT}"
        )
    cells = row.cells()
    unknown_positions = [i for i, c in enumerate(cells) if c == _UNKNOWN]
    count = 0
    for assignment in itertools.product(
        (_OPERATIONAL, _DAMAGED), repeat=len(unknown_positions),
    ):
        resolved = list(cells)
        for pos, condition in zip(unknown_positions, assignment):
            resolved[pos] = condition
        candidate = hot_springs.ConditionRow.from_cells(
            resolved, row.damaged_counts,
        )
        if candidate.is_valid():
            count += 1
    return count


# =============================================================================
# Puzzle Driver
# =============================================================================

def sum_counts(
    rows: Iterable[hot_springs.ConditionRow],
    unfold_factor: int = 1,
    show_progress: bool = False,
) -> int:
    """Sum the arrangement counts over many rows.

    Args:
        rows: Rows to count.
        unfold_factor: Unfold each row this many times before counting.
            1 counts the rows as given.
        show_progress: If True, display a tqdm progress bar over rows.

    Returns:
        The total number of valid arrangements across all rows.
    """
    rows = list(rows)
    iterator: Iterable[hot_springs.ConditionRow] = rows
    if show_progress:
        desc = "Counting"
        if unfold_factor != 1:
            desc = f"Counting x{unfold_factor}"
        iterator = tqdm.tqdm(
            rows,
            desc=desc,
            unit=" rows",
            dynamic_ncols=True,
        )
    total = 0
    for row in iterator:
        if unfold_factor != 1:
            row = hot_springs.unfold(row, unfold_factor)
        total += count_arrangements(row)
    return total


@dataclasses.dataclass(frozen=True)
class PuzzleAnswers:
    """Both answers for one puzzle input.

    Attributes:
        row_count: Number of rows in the input.
        part_one: Sum of arrangement counts over the rows as given.
        part_two: Sum of arrangement counts over the rows unfolded
            ``UNFOLD_FACTOR`` times.
    """
    row_count: int
    part_one: int
    part_two: int


def solve_puzzle(text: str, show_progress: bool = False) -> PuzzleAnswers:
    """Parse a puzzle input and compute both answers.

    Raises:
        hot_springs.MalformedRowError: If any line cannot be parsed.
    """
    rows = hot_springs.parse_input(text)
    return PuzzleAnswers(
        row_count=len(rows),
        part_one=sum_counts(rows, show_progress=show_progress),
        part_two=sum_counts(
            rows, unfold_factor=UNFOLD_FACTOR, show_progress=show_progress,
        ),
    )


# =============================================================================
# Display
# =============================================================================

def _count_colored(count: int) -> str:
    """Color a count: red for impossible rows, green for a unique one."""
    if count == 0:
        color = _C.RED
    elif count == 1:
        color = _C.GREEN
    else:
        color = _C.BLUE
    return f"{color}{count}{_C.RESET}"


def print_row_analysis(rows: Iterable[hot_springs.ConditionRow]) -> None:
    """Print each row with its plain and unfolded arrangement counts."""
    rows = list(rows)
    width = max((r.total_length() for r in rows), default=0)
    counts_width = max(
        (len(",".join(map(str, r.damaged_counts))) for r in rows),
        default=0,
    )

    print(f"{_C.BOLD}Arrangements per row{_C.RESET}")
    print(f"  {'row':<{width + counts_width + 1}}  {'x1':>8}  "
          f"{'x' + str(UNFOLD_FACTOR):>12}")
    for row in rows:
        counts = ",".join(map(str, row.damaged_counts))
        # Pad by visible length; str(row) carries ANSI codes.
        padding = " " * (
            width - row.total_length() + counts_width - len(counts)
        )
        plain = count_arrangements(row)
        unfolded = count_unfolded_arrangements(row)
        print(
            f"  {row}{padding}  "
            f"{_count_colored(plain):>{8 + len(_C.BLUE) + len(_C.RESET)}}  "
            f"{_count_colored(unfolded):>{12 + len(_C.BLUE) + len(_C.RESET)}}"
        )


def print_puzzle_answers(answers: PuzzleAnswers) -> None:
    """Print both puzzle answers."""
    print(f"{_C.DIM}Rows: {answers.row_count}{_C.RESET}")
    print(
        f"The sum of arrangements is: "
        f"{_C.BOLD}{answers.part_one}{_C.RESET}"
    )
    print(
        f"The sum of unfolded arrangements is: "
        f"{_C.BOLD}{answers.part_two}{_C.RESET}"
    )

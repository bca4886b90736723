"""Hot Springs row model.

Core value types describing a row of hot springs: the condition of each
spring, run-length compressed into ``Run`` blocks, together with the
ordered lengths of the damaged groups the row must contain. Provides
parsing of the puzzle's plain-text notation, normalization of run
sequences, and the "unfold" transformation used by the extended puzzle.
"""

from __future__ import annotations

import dataclasses
import enum
import itertools
from collections.abc import Iterable


# =============================================================================
# ANSI Color Constants
# =============================================================================

class _Colors:
    """ANSI escape codes for terminal coloring."""
    BLUE = "\033[94m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


# =============================================================================
# Errors
# =============================================================================

class MalformedRowError(ValueError):
    """Raised when a line of puzzle input cannot be parsed into a row.

    Attributes:
        line: The offending line of input.
        line_number: 1-based position of the line in the input text, or
            None when a single line was parsed on its own.
    """

    def __init__(
        self, message: str, line: str, line_number: int | None = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line = line
        self.line_number = line_number


# =============================================================================
# Enums
# =============================================================================

class Condition(enum.Enum):
    """Condition of a single spring.

    The value of each member is the symbol used for it in the puzzle
    notation.
    """
    OPERATIONAL = "."
    DAMAGED = "#"
    UNKNOWN = "?"

    @property
    def symbol(self) -> str:
        """The single-character notation for this condition."""
        return self.value

    def ansi(self) -> str:
        """Returns the ANSI color code for this condition."""
        return {
            Condition.OPERATIONAL: _Colors.DIM,
            Condition.DAMAGED: _Colors.RED,
            Condition.UNKNOWN: _Colors.YELLOW,
        }[self]


# =============================================================================
# Runs
# =============================================================================

@dataclasses.dataclass(frozen=True)
class Run:
    """A block of consecutive springs sharing the same condition.

    Attributes:
        condition: Condition shared by every spring in the block.
        length: Number of springs in the block. Always at least 1.
    """
    condition: Condition
    length: int

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(
                f"Run length must be at least 1, got {self.length}"
            )

    def __str__(self) -> str:
        return self.condition.symbol * self.length

    def __repr__(self) -> str:
        return f"Run({self.condition.name}, {self.length})"


def merge_adjacent(runs: Iterable[Run]) -> tuple[Run, ...]:
    """Merge neighbouring runs that share a condition.

    The result is maximal: no two adjacent runs have the same condition.
    Merging an already-maximal sequence returns it unchanged.

    Args:
        runs: Runs in left-to-right order.

    Returns:
        A tuple of maximal runs covering the same springs.
    """
    merged: list[Run] = []
    for run in runs:
        if merged and merged[-1].condition == run.condition:
            previous = merged.pop()
            run = Run(run.condition, previous.length + run.length)
        merged.append(run)
    return tuple(merged)


def _encode_runs(conditions: Iterable[Condition]) -> tuple[Run, ...]:
    """Run-length encode a per-spring sequence of conditions."""
    return tuple(
        Run(condition, sum(1 for _ in group))
        for condition, group in itertools.groupby(conditions)
    )


# =============================================================================
# Condition Row
# =============================================================================

@dataclasses.dataclass(frozen=True)
class ConditionRow:
    """One row of the condition records.

    Rows are immutable. Every operation that produces a different run
    sequence returns a new row built through ``merge_adjacent``.

    Attributes:
        runs: Maximal runs of springs, left to right.
        damaged_counts: Required lengths of the contiguous damaged
            groups, left to right.
    """
    runs: tuple[Run, ...]
    damaged_counts: tuple[int, ...]

    def __post_init__(self) -> None:
        # Accept lists from callers but always store tuples.
        object.__setattr__(self, "runs", tuple(self.runs))
        object.__setattr__(self, "damaged_counts", tuple(self.damaged_counts))
        for left, right in zip(self.runs, self.runs[1:]):
            if left.condition == right.condition:
                raise ValueError(
                    f"Adjacent runs share condition "
                    f"{left.condition.name}: {self.runs!r}"
                )
        for count in self.damaged_counts:
            if count < 1:
                raise ValueError(
                    f"Damaged counts must be positive, got {count}"
                )

    # ── Construction ─────────────────────────────────────────

    @classmethod
    def from_string(cls, line: str) -> ConditionRow:
        """Create a row from its puzzle notation.

        See ``parse_line`` for the accepted format.
        """
        return parse_line(line)

    @classmethod
    def from_cells(
        cls,
        conditions: Iterable[Condition],
        damaged_counts: Iterable[int],
    ) -> ConditionRow:
        """Create a row from one condition per spring.

        Args:
            conditions: Condition of each spring, left to right.
            damaged_counts: Required damaged group lengths.

        Returns:
            A new row with the springs run-length encoded.
        """
        return cls(_encode_runs(conditions), tuple(damaged_counts))

    # ── Queries ──────────────────────────────────────────────

    def total_length(self) -> int:
        """Total number of springs in the row."""
        return total_length(self)

    def cells(self) -> tuple[Condition, ...]:
        """The row expanded to one condition per spring."""
        return tuple(
            run.condition
            for run in self.runs
            for _ in range(run.length)
        )

    @property
    def unknown_count(self) -> int:
        """Number of springs whose condition is unknown."""
        return sum(
            run.length for run in self.runs
            if run.condition == Condition.UNKNOWN
        )

    @property
    def is_resolved(self) -> bool:
        """True if no spring in the row is unknown."""
        return all(run.condition != Condition.UNKNOWN for run in self.runs)

    def damaged_groups(self) -> tuple[int, ...]:
        """Lengths of the confirmed damaged runs, left to right."""
        return tuple(
            run.length for run in self.runs
            if run.condition == Condition.DAMAGED
        )

    def is_valid(self) -> bool:
        """Check a resolved row against its damaged counts.

        Returns:
            True if the damaged runs match ``damaged_counts`` exactly.

        Raises:
            ValueError: If the row still contains unknown springs.
        """
        if not self.is_resolved:
            raise ValueError(
                f"Cannot validate a row with {self.unknown_count} "
                f"unknown spring(s): {self.to_notation()!r}"
            )
        return self.damaged_groups() == self.damaged_counts

    # ── Transformations ──────────────────────────────────────

    def unfold(self, copies: int) -> ConditionRow:
        """Unfold the row. See the module-level ``unfold``."""
        return unfold(self, copies)

    # ── Display ──────────────────────────────────────────────

    def springs_notation(self) -> str:
        """The springs in ``.#?`` notation, without counts."""
        return "".join(str(run) for run in self.runs)

    def to_notation(self) -> str:
        """The row in puzzle notation, e.g. ``"???.### 1,1,3"``."""
        counts = ",".join(str(c) for c in self.damaged_counts)
        return f"{self.springs_notation()} {counts}"

    def __str__(self) -> str:
        springs = "".join(
            f"{run.condition.ansi()}{run}{_Colors.RESET}"
            for run in self.runs
        )
        counts = ",".join(str(c) for c in self.damaged_counts)
        return f"{springs} {_Colors.BOLD}{counts}{_Colors.RESET}"


# =============================================================================
# Row Operations
# =============================================================================

def total_length(row: ConditionRow) -> int:
    """Sum of the run lengths of a row."""
    return sum(run.length for run in row.runs)


def unfold(row: ConditionRow, copies: int) -> ConditionRow:
    """Unfold a row into several copies joined by unknown springs.

    The springs become ``copies`` repetitions of the original springs
    with a single unknown spring between neighbouring repetitions, and
    the damaged counts become the original counts repeated ``copies``
    times.

    Args:
        row: The row to unfold.
        copies: Number of repetitions, at least 1. ``1`` returns an
            equal row.

    Returns:
        The unfolded row.

    Raises:
        ValueError: If ``copies`` is less than 1.
    """
    if copies < 1:
        raise ValueError(f"Unfold requires at least 1 copy, got {copies}")
    runs = list(row.runs)
    for _ in range(copies - 1):
        runs.append(Run(Condition.UNKNOWN, 1))
        runs.extend(row.runs)
    return ConditionRow(merge_adjacent(runs), row.damaged_counts * copies)


# =============================================================================
# Parsing
# =============================================================================

def _parse_springs(spec: str, line: str) -> tuple[Run, ...]:
    """Parse the ``.#?`` part of a row into runs.

    Raises:
        MalformedRowError: If a character is not a spring symbol.
    """
    if not spec:
        raise MalformedRowError("Row has no springs", line)
    conditions = []
    for position, char in enumerate(spec):
        try:
            conditions.append(Condition(char))
        except ValueError:
            raise MalformedRowError(
                f"Unknown spring symbol {char!r} at column {position + 1}",
                line,
            )
    return _encode_runs(conditions)


def _parse_damaged_counts(spec: str, line: str) -> tuple[int, ...]:
    """Parse the comma-separated damaged group lengths.

    Raises:
        MalformedRowError: If a count is not a positive integer.
    """
    counts = []
    for token in spec.split(","):
        try:
            count = int(token)
        except ValueError:
            raise MalformedRowError(
                f"Invalid damaged count {token!r}", line,
            )
        if count < 1:
            raise MalformedRowError(
                f"Damaged count must be positive, got {count}", line,
            )
        counts.append(count)
    return tuple(counts)


def parse_line(line: str) -> ConditionRow:
    """Parse one line of puzzle input.

    The line holds the springs in ``.#?`` notation and the damaged
    group lengths, separated by whitespace::

        ???.### 1,1,3

    Args:
        line: A single line of input. Surrounding whitespace is ignored.

    Returns:
        The parsed row.

    Raises:
        MalformedRowError: If the line has no separating whitespace,
            contains an unknown spring symbol, or a damaged count is not
            a positive integer.
    """
    parts = line.split(maxsplit=1)
    if len(parts) != 2:
        raise MalformedRowError(
            "Expected springs and damaged counts separated by whitespace",
            line,
        )
    springs_spec, counts_spec = parts
    return ConditionRow(
        _parse_springs(springs_spec, line),
        _parse_damaged_counts(counts_spec.strip(), line),
    )


def parse_input(text: str) -> list[ConditionRow]:
    """Parse a whole puzzle input, one row per non-blank line.

    Raises:
        MalformedRowError: For the first line that cannot be parsed. The
            error carries that line's 1-based ``line_number``.
    """
    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            rows.append(parse_line(line))
        except MalformedRowError as e:
            raise MalformedRowError(
                str(e), line, line_number=line_number,
            ) from e
    return rows

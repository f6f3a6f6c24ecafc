"""Plain-sequence helpers shared by the matrix engine and the solver.

:class:`~linfft.matrix.Matrix` stores its cells as a list of Python lists.
The helpers below convert arbitrary row-major input (nested lists, tuples,
generators or :mod:`numpy` arrays) into that representation and provide the
handful of sequence operations the solver needs without going through a
full :class:`Matrix`.  Keeping them separate lets callers that only hold
plain sequences reuse the same validation rules.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence

from .errors import DimensionMismatchError


Row = List[Any]
Rows = List[Row]


def as_row(values: Iterable[Any], dtype: Optional[Callable[[Any], Any]] = None) -> Row:
    """Return a fresh list holding ``values``, converted with ``dtype`` if given.

    A new list is always returned so the result never aliases caller storage.
    """

    if dtype is None:
        return list(values)
    return [dtype(v) for v in values]


def as_rows(rows: Iterable[Iterable[Any]], dtype: Optional[Callable[[Any], Any]] = None) -> Rows:
    """Convert *rows* into the canonical list-of-lists representation.

    All rows must have the same width; a :class:`DimensionMismatchError` is
    raised otherwise.  An empty iterable yields an empty list, the
    representation of the 0x0 matrix.
    """

    converted: Rows = [as_row(row, dtype) for row in rows]
    if not converted:
        return converted
    width = len(converted[0])
    for index, row in enumerate(converted):
        if len(row) != width:
            raise DimensionMismatchError(
                f"inconsistent row width: row {index} has {len(row)} entries, expected {width}",
                expected=width,
                actual=len(row),
            )
    return converted


def pad_row(values: Sequence[Any], width: int, fill: Any) -> Row:
    """Return ``values`` extended with ``fill`` up to ``width`` entries.

    Rows longer than ``width`` are rejected.
    """

    if len(values) > width:
        raise DimensionMismatchError(
            f"row of length {len(values)} does not fit in width {width}",
            expected=width,
            actual=len(values),
        )
    return list(values) + [fill] * (width - len(values))


def dot(lhs: Sequence[Any], rhs: Sequence[Any], zero: Any = 0) -> Any:
    total = zero
    for a, b in zip(lhs, rhs):
        total = total + a * b
    return total


def matvec(rows: Sequence[Sequence[Any]], vector: Sequence[Any], zero: Any = 0) -> Row:
    if rows and len(rows[0]) != len(vector):
        raise DimensionMismatchError(
            "dimension mismatch in matvec",
            expected=len(rows[0]),
            actual=len(vector),
        )
    return [dot(row, vector, zero) for row in rows]


def is_close(lhs: Any, rhs: Any, atol: float = 1e-9) -> bool:
    """Absolute-tolerance comparison usable for real, complex and exact types."""

    return abs(lhs - rhs) <= atol

"""Exception hierarchy for the matrix engine, solver and transform.

Every error raised on purpose by :mod:`linfft` derives from
:class:`LinearAlgebraError` so callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any, Optional


class LinearAlgebraError(Exception):
    """Base exception for all linfft errors."""


class DimensionMismatchError(LinearAlgebraError, ValueError):
    """Operands do not have the shapes an operation requires.

    Raised for non-conformable addition, subtraction and multiplication,
    for non-square input to inversion or the determinant, for ragged rows
    and for solver inputs whose sizes disagree.  It also derives from
    :class:`ValueError` so plain ``except ValueError`` handlers keep working.
    """

    def __init__(self, message: str, expected: Optional[Any] = None, actual: Optional[Any] = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DegenerateMatrixError(LinearAlgebraError):
    """Attempted to take the inverse of a degenerate matrix.

    Attributes:
        column: index of the column for which no nonzero pivot was found
    """

    def __init__(self, message: str = "attempted to take the inverse of a degenerate matrix", column: Optional[int] = None) -> None:
        super().__init__(message)
        self.column = column

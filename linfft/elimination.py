"""Gauss-Jordan inversion and determinant by forward elimination.

Both routines search for the *first* row with a nonzero entry in the pivot
column rather than the one of largest magnitude.  With exact types such as
:class:`fractions.Fraction` this makes no difference; with ``float`` it
means ill-conditioned input is handled less gracefully than by a
partial-pivoting solver, in exchange for reproducible row orderings.

The two routines treat a missing pivot differently: :func:`invert` raises
:class:`~linfft.errors.DegenerateMatrixError` while :func:`determinant`
returns zero.

The matrix argument is only used through its public interface (``rows``,
``columns``, ``tolist``, ``from_rows``), which keeps this module free of an
import cycle with :mod:`linfft.matrix`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from .errors import DegenerateMatrixError, DimensionMismatchError


logger = logging.getLogger(__name__)


def _require_square(matrix: Any, operation: str) -> int:
    rows, columns = matrix.rows(), matrix.columns()
    if rows != columns:
        raise DimensionMismatchError(
            f"{operation} requires a square matrix, got {rows}x{columns}",
            expected=(rows, rows),
            actual=(rows, columns),
        )
    return rows


def _first_pivot(work: List[List[Any]], column: int, zero: Any) -> Optional[int]:
    for row in range(column, len(work)):
        if work[row][column] != zero:
            return row
    return None


def invert(matrix: Any, dtype: Callable[..., Any] = float) -> Any:
    """Return the inverse of ``matrix`` with every entry computed in ``dtype``.

    A working copy converted to ``dtype`` is reduced to the identity while the
    same row operations, applied to an identity accumulator, build the
    inverse.  Nothing is returned for degenerate input: the whole operation
    fails with :class:`DegenerateMatrixError`.
    """

    n = _require_square(matrix, "inverse")
    zero, one = dtype(0), dtype(1)
    tmp = [[dtype(v) for v in row] for row in matrix.tolist()]
    ret = [[one if i == j else zero for j in range(n)] for i in range(n)]

    for i in range(n):
        j = _first_pivot(tmp, i, zero)
        if j is None:
            logger.debug("no nonzero pivot in column %d of %dx%d matrix", i, n, n)
            raise DegenerateMatrixError(column=i)
        if j != i:
            # columns left of i are already zero in both rows
            tmp[i][i:], tmp[j][i:] = tmp[j][i:], tmp[i][i:]
            ret[i], ret[j] = ret[j], ret[i]

        pivot_row = tmp[i]
        pivot = pivot_row[i]
        for k in range(n):
            if k == i:
                continue
            pivot_row[k] = pivot_row[k] / pivot
        ret[i] = [v / pivot for v in ret[i]]
        pivot_row[i] = one

        for j in range(n):
            if j == i:
                continue
            entry = tmp[j][i]
            row, acc = tmp[j], ret[j]
            for k in range(n):
                row[k] = row[k] - (pivot_row[k] / pivot_row[i]) * entry
                acc[k] = acc[k] - (ret[i][k] / pivot_row[i]) * entry

    return type(matrix).from_rows(ret, dtype)


def determinant(matrix: Any, dtype: Callable[..., Any] = float) -> Any:
    """Return the determinant of ``matrix`` computed in ``dtype``.

    The matrix is brought to upper-triangular form and the diagonal is
    multiplied out; each row swap flips the sign.  If a column other than the
    last has no nonzero pivot the determinant is ``dtype(0)``.  The 0x0
    matrix has determinant ``dtype(1)``.
    """

    n = _require_square(matrix, "determinant")
    zero = dtype(0)
    tmp = [[dtype(v) for v in row] for row in matrix.tolist()]
    negative = False

    for i in range(n - 1):
        j = _first_pivot(tmp, i, zero)
        if j is None:
            logger.debug("no nonzero pivot in column %d, determinant is zero", i)
            return zero
        if j != i:
            tmp[i][i:], tmp[j][i:] = tmp[j][i:], tmp[i][i:]
            negative = not negative
        pivot_row = tmp[i]
        for j in range(i + 1, n):
            entry = tmp[j][i]
            row = tmp[j]
            for k in range(i, n):
                row[k] = row[k] - (pivot_row[k] / pivot_row[i]) * entry

    result = dtype(1)
    for i in range(n):
        result = result * tmp[i][i]
    return -result if negative else result

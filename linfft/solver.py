"""Solve square systems of simultaneous linear equations."""

from __future__ import annotations

from typing import Any, Callable, List, Sequence, Union

from .errors import DimensionMismatchError
from .linalg import matvec, pad_row
from .matrix import Matrix


def solve(
    coefficients: Union[Matrix, Sequence[Sequence[Any]]],
    rhs: Sequence[Any],
    dtype: Callable[..., Any] = float,
) -> List[Any]:
    """Return ``x`` such that ``coefficients * x == rhs``.

    ``coefficients`` holds ``n`` rows; a row shorter than ``n`` is padded with
    zeros on the right.  ``rhs`` must have exactly ``n`` entries.  The system
    is solved by inverting the coefficient matrix in ``dtype`` and applying the
    inverse to ``rhs``, so a singular system raises
    :class:`~linfft.errors.DegenerateMatrixError` and nothing is returned.
    """

    rows = coefficients.tolist() if isinstance(coefficients, Matrix) else [list(row) for row in coefficients]
    n = len(rows)
    if len(rhs) != n:
        raise DimensionMismatchError(
            f"right-hand side has {len(rhs)} entries for {n} equations",
            expected=n,
            actual=len(rhs),
        )

    zero = dtype(0)
    system = Matrix.from_rows([pad_row(row, n, zero) for row in rows], dtype)
    return matvec(system.inverse(dtype).tolist(), [dtype(v) for v in rhs], zero)

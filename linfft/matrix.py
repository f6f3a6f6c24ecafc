"""Dense matrix container with value semantics.

A :class:`Matrix` is a rectangular grid of numbers addressed by zero-based
``(row, column)`` pairs.  The element type is not fixed: every matrix
carries a ``dtype`` callable (``float``, ``int``, ``complex``,
:class:`fractions.Fraction`, :class:`numpy.longdouble`, ...) used to build
zeros and ones.  Any type supporting ``+``, ``-``, ``*``, ``/`` and ``==``
works.

Matrices never share storage.  Every constructor, arithmetic operation and
copy produces fresh row lists, so mutating one matrix through
``m[row, col] = value`` can never be observed through another.

Indexed access is unchecked beyond what Python lists do: indices past the
end raise :class:`IndexError` while negative indices wrap around.  Keeping
indices in range is the caller's responsibility.
"""

from __future__ import annotations

import copy as _copy
from typing import Any, Callable, Iterable, List, Optional, Tuple

import numpy as np

from .elimination import determinant as _determinant
from .elimination import invert as _invert
from .errors import DimensionMismatchError
from .linalg import Rows, as_rows, is_close


DType = Callable[..., Any]


class Matrix:
    """Rectangular grid of numeric values.

    ``Matrix(rows, columns)`` fills every cell with ``dtype()`` (the zero of
    the type); ``Matrix(rows, columns, fill)`` stores ``fill`` in every cell.
    The column count is stored alongside the cells, so ``R x 0`` and
    ``0 x C`` shapes are kept distinct from the 0x0 matrix.

    ``dtype`` follows the cells: results of arithmetic take the type of
    their first cell, so an ``int`` matrix scaled by ``0.5`` reports
    ``float``.  Matrices without cells keep the dtype they were built with.
    """

    def __init__(self, rows: int, columns: int, fill: Any = None, dtype: DType = float) -> None:
        if rows < 0 or columns < 0:
            raise DimensionMismatchError(
                f"matrix dimensions must be non-negative, got {rows}x{columns}",
                actual=(rows, columns),
            )
        value = dtype() if fill is None else fill
        self._dtype = dtype
        self._columns = columns
        self._data: Rows = [[value] * columns for _ in range(rows)]

    @classmethod
    def _wrap(cls, data: Rows, dtype: DType, columns: Optional[int] = None) -> "Matrix":
        # Takes ownership of ``data``; callers must pass freshly built rows.
        matrix = cls.__new__(cls)
        matrix._dtype = dtype
        matrix._columns = (len(data[0]) if data else 0) if columns is None else columns
        matrix._data = data
        return matrix

    @classmethod
    def _result(cls, data: Rows, fallback: DType, columns: int) -> "Matrix":
        dtype = type(data[0][0]) if data and data[0] else fallback
        return cls._wrap(data, dtype, columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]], dtype: Optional[DType] = None) -> "Matrix":
        """Build a matrix from row-major nested iterables.

        The input is deep-copied.  When ``dtype`` is given every cell is
        converted with it; otherwise values are stored unchanged and the
        matrix adopts the type of its first cell (``float`` when there is
        none).  Mixed input such as ``[[1, 0.5]]`` is not unified.
        """

        data = as_rows(rows, dtype)
        if dtype is None:
            return cls._result(data, float, len(data[0]) if data else 0)
        return cls._wrap(data, dtype)

    @classmethod
    def identity(cls, size: int, dtype: DType = float) -> "Matrix":
        ret = cls(size, size, dtype(0), dtype)
        for i in range(size):
            ret._data[i][i] = dtype(1)
        return ret

    @property
    def dtype(self) -> DType:
        return self._dtype

    def rows(self) -> int:
        return len(self._data)

    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows(), self.columns()

    def is_square(self) -> bool:
        return self.rows() == self.columns()

    # ------------------------------------------------------------------
    # element access
    # ------------------------------------------------------------------
    def at(self, row: int, column: int) -> Any:
        return self._data[row][column]

    def set(self, row: int, column: int, value: Any) -> None:
        self._data[row][column] = value

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        row, column = index
        return self._data[row][column]

    def __setitem__(self, index: Tuple[int, int], value: Any) -> None:
        row, column = index
        self._data[row][column] = value

    def tolist(self) -> List[List[Any]]:
        return [list(row) for row in self._data]

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Return the cells as a 2-D :class:`numpy.ndarray`."""

        return np.array(self._data, dtype=dtype).reshape(self.rows(), self.columns())

    def copy(self, dtype: Optional[DType] = None) -> "Matrix":
        """Return an independent deep copy, converted to ``dtype`` if given."""

        if dtype is None:
            return self._wrap([list(row) for row in self._data], self._dtype, self._columns)
        return self._wrap([[dtype(v) for v in row] for row in self._data], dtype, self._columns)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self._wrap(_copy.deepcopy(self._data, memo), self._dtype, self._columns)

    # ------------------------------------------------------------------
    # algebra
    # ------------------------------------------------------------------
    def _require_same_shape(self, other: "Matrix", operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"cannot {operation} a {self.rows()}x{self.columns()} matrix and a "
                f"{other.rows()}x{other.columns()} matrix",
                expected=self.shape,
                actual=other.shape,
            )

    def add(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "add")
        data = [[a + b for a, b in zip(lhs, rhs)] for lhs, rhs in zip(self._data, other._data)]
        return self._result(data, self._dtype, self._columns)

    def negate(self) -> "Matrix":
        return self._result([[-v for v in row] for row in self._data], self._dtype, self._columns)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "subtract")
        return self.add(other.negate())

    def scale(self, factor: Any) -> "Matrix":
        return self._result([[v * factor for v in row] for row in self._data], self._dtype, self._columns)

    def multiply(self, other: "Matrix") -> "Matrix":
        """Return the matrix product ``self * other``.

        Accumulates in ``i, k, j`` order so the innermost loop walks a row
        of ``other`` and a row of the result.
        """

        if self.columns() != other.rows():
            raise DimensionMismatchError(
                f"cannot multiply a {self.rows()}x{self.columns()} matrix by a "
                f"{other.rows()}x{other.columns()} matrix",
                expected=self.columns(),
                actual=other.rows(),
            )
        zero = self._dtype(0)
        width = other.columns()
        data: Rows = []
        for lhs_row in self._data:
            out = [zero] * width
            for k, a in enumerate(lhs_row):
                rhs_row = other._data[k]
                for j in range(width):
                    out[j] = out[j] + a * rhs_row[j]
            data.append(out)
        return self._result(data, self._dtype, width)

    def transpose(self) -> "Matrix":
        ret = Matrix(self.columns(), self.rows(), dtype=self._dtype)
        for i, row in enumerate(self._data):
            for j, value in enumerate(row):
                ret._data[j][i] = value
        return ret

    def equals(self, other: "Matrix") -> bool:
        """Exact elementwise comparison; differently shaped matrices differ."""

        if self.shape != other.shape:
            return False
        return all(a == b for lhs, rhs in zip(self._data, other._data) for a, b in zip(lhs, rhs))

    def isclose(self, other: "Matrix", atol: float = 1e-9) -> bool:
        if self.shape != other.shape:
            return False
        return all(is_close(a, b, atol) for lhs, rhs in zip(self._data, other._data) for a, b in zip(lhs, rhs))

    def inverse(self, dtype: DType = float) -> "Matrix":
        """Return the inverse computed by Gauss-Jordan elimination in ``dtype``.

        Raises:
            DimensionMismatchError: the matrix is not square.
            DegenerateMatrixError: some column has no nonzero pivot.
        """

        return _invert(self, dtype)

    def determinant(self, dtype: DType = float) -> Any:
        """Return the determinant computed in ``dtype``; singular matrices give zero."""

        return _determinant(self, dtype)

    # ------------------------------------------------------------------
    # operators
    # ------------------------------------------------------------------
    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Matrix":
        return self.negate()

    def __mul__(self, other: Any) -> "Matrix":
        if isinstance(other, Matrix):
            return self.multiply(other)
        return self.scale(other)

    def __rmul__(self, other: Any) -> "Matrix":
        return self.scale(other)

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return not self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # text form
    # ------------------------------------------------------------------
    def render(self) -> str:
        """One line per row, cells separated by a single space, newline after each row."""

        return "".join(" ".join(str(v) for v in row) + "\n" for row in self._data)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if not self._data:
            return f"Matrix(0, {self._columns})"
        return f"Matrix.from_rows({self._data!r})"

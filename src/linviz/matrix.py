"""
Dense matrix engine for small 2D linear-algebra demos.

Every operation returns a new ``Matrix``; inputs are never mutated. Failures
(dimension mismatch, non-square input, singular inverse) are not raised.
Instead a diagnostic is logged and an *invalid* matrix is returned whose
``rows`` and ``cols`` are NaN. Invalid matrices propagate through any further
arithmetic, and ``Matrix.unwrap()`` converts them into typed exceptions for
callers that prefer them.

Example:
    >>> from linviz.matrix import Matrix
    >>> a = Matrix.from_rows([[2, 1], [1, 1]])
    >>> a.determinant()
    1
    >>> (a @ a.inverse()).allclose(Matrix.identity(2))
    True
    >>> Matrix.from_rows([[1, 2], [2, 4]]).inverse().is_valid
    False
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeAlias

import numpy as np

logger = logging.getLogger(__name__)

Scalar: TypeAlias = int | float
MapFunction: TypeAlias = Callable[[Scalar, int, int], Scalar]


class MatrixError(Enum):
    """Failure kinds signalled by the invalid sentinel."""

    DIMENSION_MISMATCH = "dimension mismatch"
    NOT_SQUARE = "not square"
    SINGULAR = "singular"


class MatrixAlgebraError(ValueError):
    """Base class for errors raised by ``Matrix.unwrap()``."""

    kind: MatrixError


class DimensionMismatchError(MatrixAlgebraError):
    kind = MatrixError.DIMENSION_MISMATCH


class NotSquareError(MatrixAlgebraError):
    kind = MatrixError.NOT_SQUARE


class SingularMatrixError(MatrixAlgebraError):
    kind = MatrixError.SINGULAR


_ERROR_TYPES: dict[MatrixError, type[MatrixAlgebraError]] = {
    MatrixError.DIMENSION_MISMATCH: DimensionMismatchError,
    MatrixError.NOT_SQUARE: NotSquareError,
    MatrixError.SINGULAR: SingularMatrixError,
}


def _is_scalar(value: object) -> bool:
    return isinstance(value, int | float | np.number) and not isinstance(value, bool)


def _require_scalar(value: object, op: str) -> None:
    if not _is_scalar(value):
        raise TypeError(f"Cannot {op} a Matrix and {type(value).__name__}")


class Matrix:
    """Row-major dense matrix of real numbers.

    :param rows: Number of rows
    :param cols: Number of columns
    """

    __hash__ = None  # mutable through ``data``

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.error: MatrixError | None = None
        if self.is_valid:
            self.data: list[list[Scalar]] = [[0] * cols for _ in range(rows)]
        else:
            self.data = []

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Scalar]]) -> Matrix:
        """Create a matrix from a nested sequence of numbers.

        The shape is taken from the outer length and the length of the first
        row. Row lengths are not validated.

        :param rows: Nested numeric sequence, one inner sequence per row
        :returns: New Matrix holding a copy of the values
        """
        if len(rows) == 0:
            return cls(0, 0)
        return cls(len(rows), len(rows[0])).map(lambda _, row, col: rows[row][col])

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Create the ``size`` x ``size`` identity matrix."""
        return cls(size, size).map(lambda _, row, col: 1 if row == col else 0)

    @classmethod
    def invalid(cls, error: MatrixError) -> Matrix:
        """Create the invalid sentinel for a failed operation.

        :param error: Failure kind carried by the sentinel
        :returns: Matrix with NaN dimensions and no data
        """
        matrix = cls(math.nan, math.nan)
        matrix.error = error
        return matrix

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Matrix:
        """Create a matrix from a 2D numpy array.

        :param array: Array of shape [rows, cols]
        :returns: New Matrix with float entries
        :raises ValueError: If the array is not two-dimensional
        """
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim}D")
        return cls.from_rows(array.tolist()) if array.shape[0] else cls(0, array.shape[1])

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def is_valid(self) -> bool:
        """False for the invalid sentinel (NaN dimensions)."""
        return not (math.isnan(self.rows) or math.isnan(self.cols))

    @property
    def is_square(self) -> bool:
        return self.is_valid and self.rows == self.cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def unwrap(self) -> Matrix:
        """Return self, or raise the typed error carried by an invalid matrix.

        :returns: This matrix when valid
        :raises MatrixAlgebraError: Subclass matching ``self.error``
        """
        if self.is_valid:
            return self
        error = self.error or MatrixError.DIMENSION_MISMATCH
        raise _ERROR_TYPES[error](f"Invalid matrix: {error.value}")

    # ========================================================================
    # Elementwise primitives
    # ========================================================================

    def map(self, fn: MapFunction) -> Matrix:
        """Apply ``fn(value, row, col)`` to every cell.

        :param fn: Function receiving the cell value and its coordinates
        :returns: New matrix of the same shape
        """
        if not self.is_valid:
            return self._propagate("map")
        result = Matrix(self.rows, self.cols)
        for row in range(self.rows):
            for col in range(self.cols):
                result.data[row][col] = fn(self.data[row][col], row, col)
        return result

    def copy(self) -> Matrix:
        return self.map(lambda value, _row, _col: value)

    def transpose(self) -> Matrix:
        if not self.is_valid:
            return self._propagate("transpose")
        source = self.copy()
        return Matrix(self.cols, self.rows).map(lambda _, row, col: source.data[col][row])

    def minor(self, row: int, col: int) -> Matrix:
        """Submatrix with ``row`` and ``col`` removed."""
        return Matrix(self.rows - 1, self.cols - 1).map(
            lambda _, r, c: self.data[r if r < row else r + 1][c if c < col else c + 1]
        )

    # ========================================================================
    # Arithmetic
    # ========================================================================

    def add(self, value: Scalar | Matrix) -> Matrix:
        """Add a scalar to every cell, or add a same-shape matrix.

        :param value: Scalar or Matrix
        :returns: New matrix, or the invalid sentinel on shape mismatch
        """
        return self._elementwise(value, lambda a, b: a + b, "add")

    def subtract(self, value: Scalar | Matrix) -> Matrix:
        """Subtract a scalar from every cell, or subtract a same-shape matrix.

        :param value: Scalar or Matrix
        :returns: New matrix, or the invalid sentinel on shape mismatch
        """
        return self._elementwise(value, lambda a, b: a - b, "subtract")

    def multiply(self, value: Scalar | Matrix) -> Matrix:
        """Multiply by a scalar, or compute the matrix product ``self @ value``.

        :param value: Scalar or Matrix with ``value.rows == self.cols``
        :returns: New matrix, or the invalid sentinel on shape mismatch
        :raises TypeError: If value is neither a number nor a Matrix
        """
        if not isinstance(value, Matrix):
            _require_scalar(value, "multiply")
            return self.map(lambda cell, _row, _col: cell * value)
        if not self.is_valid:
            return self._propagate("multiply")
        if not value.is_valid:
            return value._propagate("multiply")
        if self.cols != value.rows:
            return self._fail(
                MatrixError.DIMENSION_MISMATCH,
                "Cannot multiply %dx%d by %dx%d: columns of the first must match rows "
                "of the second",
                self.rows,
                self.cols,
                value.rows,
                value.cols,
            )

        def product(_, row, col):
            total = 0
            for k in range(self.cols):
                total += self.data[row][k] * value.data[k][col]
            return total

        return Matrix(self.rows, value.cols).map(product)

    def _elementwise(
        self, value: Scalar | Matrix, op: Callable[[Scalar, Scalar], Scalar], name: str
    ) -> Matrix:
        if not isinstance(value, Matrix):
            _require_scalar(value, name)
            return self.map(lambda cell, _row, _col: op(cell, value))
        if not self.is_valid:
            return self._propagate(name)
        if not value.is_valid:
            return value._propagate(name)
        if self.shape != value.shape:
            return self._fail(
                MatrixError.DIMENSION_MISMATCH,
                "Cannot %s %dx%d and %dx%d: rows and columns must match",
                name,
                self.rows,
                self.cols,
                value.rows,
                value.cols,
            )
        return self.map(lambda cell, row, col: op(cell, value.data[row][col]))

    # ========================================================================
    # Square-matrix operations
    # ========================================================================

    def determinant(self) -> Scalar:
        """Determinant by cofactor expansion along the first row.

        Exponential in the matrix size; intended for matrices up to ~5x5.

        :returns: Determinant, or NaN for non-square or invalid input
        """
        if not self.is_valid:
            logger.debug("[Matrix] determinant of invalid matrix (%s)", self.error)
            return math.nan
        if self.rows != self.cols:
            self._fail(
                MatrixError.NOT_SQUARE,
                "Determinant requires a square matrix, got %dx%d",
                self.rows,
                self.cols,
            )
            return math.nan
        return self._determinant()

    def _determinant(self) -> Scalar:
        if self.rows == 0:
            return 1
        if self.rows == 1:
            return self.data[0][0]
        if self.rows == 2:
            return self.data[0][0] * self.data[1][1] - self.data[0][1] * self.data[1][0]
        total = 0
        for col in range(self.cols):
            sign = 1 if col % 2 == 0 else -1
            total += sign * self.data[0][col] * self.minor(0, col)._determinant()
        return total

    def adjugate(self) -> Matrix:
        """Transpose of the cofactor matrix.

        :returns: Adjugate, or the invalid sentinel for non-square input
        """
        if not self.is_valid:
            return self._propagate("adjugate")
        if self.rows != self.cols:
            return self._fail(
                MatrixError.NOT_SQUARE,
                "Adjugate requires a square matrix, got %dx%d",
                self.rows,
                self.cols,
            )
        cofactors = Matrix(self.rows, self.cols).map(
            lambda _, row, col: (1 if (row + col) % 2 == 0 else -1)
            * self.minor(row, col)._determinant()
        )
        return cofactors.transpose()

    def inverse(self) -> Matrix:
        """Inverse via ``adjugate / determinant``.

        :returns: Inverse, or the invalid sentinel for non-square or singular input
        """
        if not self.is_valid:
            return self._propagate("inverse")
        if self.rows != self.cols:
            return self._fail(
                MatrixError.NOT_SQUARE,
                "Inverse requires a square matrix, got %dx%d",
                self.rows,
                self.cols,
            )
        det = self._determinant()
        if det == 0:
            return self._fail(
                MatrixError.SINGULAR, "Matrix is singular (determinant is zero), no inverse"
            )
        return self.adjugate().multiply(1 / det)

    # ========================================================================
    # Failure handling
    # ========================================================================

    def _fail(self, error: MatrixError, message: str, *args) -> Matrix:
        logger.error("[Matrix] " + message, *args)
        return Matrix.invalid(error)

    def _propagate(self, operation: str) -> Matrix:
        logger.debug("[Matrix] %s on invalid matrix (%s)", operation, self.error)
        return Matrix.invalid(self.error or MatrixError.DIMENSION_MISMATCH)

    # ========================================================================
    # Conversion and comparison
    # ========================================================================

    def to_list(self) -> list[list[Scalar]]:
        """Return a deep copy of the cell values."""
        return self.copy().data

    def to_numpy(self) -> np.ndarray:
        """Return the values as a float64 array of shape [rows, cols].

        :raises MatrixAlgebraError: If the matrix is invalid
        """
        self.unwrap()
        return np.array(self.data, dtype=np.float64).reshape(self.rows, self.cols)

    def to_string(self, places: int = 3) -> str:
        """Format as ``"(a b\\nc d)"`` with values rounded to ``places``."""
        if not self.is_valid:
            return "(invalid)"
        lines = [" ".join(_format_number(value, places) for value in row) for row in self.data]
        return "(" + "\n".join(lines) + ")"

    def allclose(self, other: Matrix, atol: float = 1e-9) -> bool:
        """Check elementwise equality within ``atol``. Invalid matrices never match."""
        if not (self.is_valid and other.is_valid) or self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= atol
            for row_a, row_b in zip(self.data, other.data, strict=True)
            for a, b in zip(row_a, row_b, strict=True)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not (self.is_valid and other.is_valid):
            return False
        return self.shape == other.shape and self.data == other.data

    def __add__(self, other: Scalar | Matrix) -> Matrix:
        if not (isinstance(other, Matrix) or _is_scalar(other)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Scalar | Matrix) -> Matrix:
        if not (isinstance(other, Matrix) or _is_scalar(other)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Scalar | Matrix) -> Matrix:
        if not (isinstance(other, Matrix) or _is_scalar(other)):
            return NotImplemented
        return self.multiply(other)

    def __radd__(self, other: Scalar) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __rmul__(self, other: Scalar) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Matrix:
        return self.multiply(-1)

    def __repr__(self) -> str:
        if not self.is_valid:
            return f"Matrix(invalid, error={self.error})"
        return f"Matrix({self.rows}x{self.cols}, {self.data})"


def _format_number(value: Scalar, places: int) -> str:
    rounded = round(value, places)
    if not math.isfinite(rounded):
        return str(rounded)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(float(rounded))

"""Tests for the dense matrix engine.

Covers construction, the map-based primitives, arithmetic, the
cofactor-based determinant/adjugate/inverse, and the invalid sentinel.
"""

import logging
import math

import numpy as np
import pytest

from linviz.matrix import (
    DimensionMismatchError,
    Matrix,
    MatrixAlgebraError,
    MatrixError,
    NotSquareError,
    SingularMatrixError,
)
from linviz.verification import MatrixVerifier


def random_square(n: int, seed: int) -> Matrix:
    """Random integer matrix with entries in [-5, 5]."""
    rng = np.random.default_rng(seed)
    return Matrix.from_numpy(rng.integers(-5, 6, size=(n, n)))


class TestConstruction:
    """Test matrix constructors."""

    def test_zero_filled(self):
        m = Matrix(2, 3)
        assert m.shape == (2, 3)
        assert m.data == [[0, 0, 0], [0, 0, 0]]

    def test_from_rows(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.rows == 2
        assert m.cols == 3
        assert m.data == [[1, 2, 3], [4, 5, 6]]

    def test_from_rows_copies_input(self):
        """Editing the source rows must not leak into the matrix."""
        rows = [[1, 2], [3, 4]]
        m = Matrix.from_rows(rows)
        rows[0][0] = 99
        assert m.data[0][0] == 1

    def test_from_rows_empty(self):
        assert Matrix.from_rows([]).shape == (0, 0)

    def test_identity(self):
        assert Matrix.identity(3).data == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

    def test_numpy_roundtrip(self):
        arr = np.array([[1.5, -2.0], [0.25, 4.0]])
        m = Matrix.from_numpy(arr)
        np.testing.assert_array_equal(m.to_numpy(), arr)

    def test_from_numpy_rejects_1d(self):
        with pytest.raises(ValueError, match="2D"):
            Matrix.from_numpy(np.array([1.0, 2.0]))

    def test_invalid_sentinel(self):
        m = Matrix.invalid(MatrixError.SINGULAR)
        assert not m.is_valid
        assert math.isnan(m.rows)
        assert math.isnan(m.cols)
        assert m.data == []
        assert m.error == MatrixError.SINGULAR


class TestPrimitives:
    """Test map, copy, transpose, and minors."""

    def test_map_receives_coordinates(self):
        m = Matrix(2, 2).map(lambda _, row, col: 10 * row + col)
        assert m.data == [[0, 1], [10, 11]]

    def test_map_does_not_mutate(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        m.map(lambda value, _r, _c: value * 100)
        assert m.data == [[1, 2], [3, 4]]

    def test_copy_is_independent(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        c = m.copy()
        c.data[0][0] = 42
        assert m.data[0][0] == 1
        assert c == Matrix.from_rows([[42, 2], [3, 4]])

    def test_transpose(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t.data == [[1, 4], [2, 5], [3, 6]]

    def test_minor(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert m.minor(1, 1).data == [[1, 3], [7, 9]]
        assert m.minor(0, 2).data == [[4, 5], [7, 8]]

    def test_to_list_is_copy(self):
        m = Matrix.from_rows([[1, 2]])
        values = m.to_list()
        values[0][0] = 5
        assert m.data == [[1, 2]]


class TestArithmetic:
    """Test add, subtract, and multiply."""

    def test_add_scalar(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.add(1).data == [[2, 3], [4, 5]]

    def test_add_matrix(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[10, 20], [30, 40]])
        assert (a + b).data == [[11, 22], [33, 44]]

    def test_subtract(self):
        a = Matrix.from_rows([[5, 5], [5, 5]])
        b = Matrix.from_rows([[1, 2], [3, 4]])
        assert a.subtract(b).data == [[4, 3], [2, 1]]
        assert (a - 5).data == [[0, 0], [0, 0]]

    def test_scalar_multiply(self):
        m = Matrix.from_rows([[1, -2]])
        assert m.multiply(3).data == [[3, -6]]
        assert (2 * m).data == [[2, -4]]
        assert (-m).data == [[-1, 2]]

    def test_matrix_product(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
        product = a @ b
        assert product.shape == (2, 2)
        assert product.data == [[58, 64], [139, 154]]

    def test_product_matches_numpy(self):
        rng = np.random.default_rng(3)
        a_arr = rng.standard_normal((3, 4))
        b_arr = rng.standard_normal((4, 2))
        result = Matrix.from_numpy(a_arr) * Matrix.from_numpy(b_arr)
        MatrixVerifier.assert_close(result, a_arr @ b_arr)

    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_identity_law(self, n):
        """A * I == A for square matrices."""
        a = random_square(n, seed=n)
        assert a.multiply(Matrix.identity(n)) == a
        assert Matrix.identity(n).multiply(a) == a

    @pytest.mark.parametrize(
        "shape_a,shape_b",
        [((2, 3), (3, 2)), ((1, 4), (4, 3)), ((3, 3), (3, 1))],
    )
    def test_transpose_of_product(self, shape_a, shape_b):
        """(A B)^T == B^T A^T."""
        rng = np.random.default_rng(7)
        a = Matrix.from_numpy(rng.integers(-9, 10, size=shape_a))
        b = Matrix.from_numpy(rng.integers(-9, 10, size=shape_b))
        assert a.multiply(b).transpose() == b.transpose().multiply(a.transpose())

    def test_non_matrix_operand_not_supported(self):
        with pytest.raises(TypeError):
            Matrix.identity(2) + "x"

    def test_scalar_on_the_left(self):
        m = Matrix.from_rows([[1, 2]])
        assert (1 + m).data == [[2, 3]]
        assert (0.5 * m).data == [[0.5, 1.0]]

    @pytest.mark.parametrize("operand", [np.array([[1, 2]]), [[1, 2]], "2", None])
    def test_non_scalar_operand_rejected(self, operand):
        """Arrays and lists are not broadcast into cells."""
        m = Matrix.from_rows([[1, 2]])
        for method in (m.add, m.subtract, m.multiply):
            with pytest.raises(TypeError, match="Cannot"):
                method(operand)


class TestDimensionMismatch:
    """Test the invalid sentinel for incompatible shapes."""

    @pytest.mark.parametrize(
        "shape_a,shape_b",
        [((2, 2), (2, 3)), ((2, 2), (3, 2)), ((1, 3), (3, 1)), ((0, 0), (1, 1))],
    )
    def test_add_subtract_mismatch(self, shape_a, shape_b, caplog):
        a, b = Matrix(*shape_a), Matrix(*shape_b)
        with caplog.at_level(logging.ERROR, logger="linviz.matrix"):
            added = a.add(b)
            subtracted = a.subtract(b)
        for result in (added, subtracted):
            assert math.isnan(result.rows) and math.isnan(result.cols)
            assert result.error == MatrixError.DIMENSION_MISMATCH
        assert "rows and columns must match" in caplog.text

    @pytest.mark.parametrize(
        "shape_a,shape_b",
        [((2, 3), (2, 3)), ((2, 2), (3, 2)), ((1, 2), (1, 2)), ((3, 1), (2, 3))],
    )
    def test_multiply_mismatch(self, shape_a, shape_b, caplog):
        with caplog.at_level(logging.ERROR, logger="linviz.matrix"):
            result = Matrix(*shape_a).multiply(Matrix(*shape_b))
        MatrixVerifier.assert_invalid(result, MatrixError.DIMENSION_MISMATCH)
        assert "Cannot multiply" in caplog.text

    def test_invalid_propagates(self, caplog):
        """Every operation on an invalid matrix stays invalid and keeps the first error."""
        bad = Matrix.from_rows([[1, 2], [2, 4]]).inverse()
        good = Matrix.identity(2)
        with caplog.at_level(logging.DEBUG, logger="linviz.matrix"):
            results = [
                bad.add(good),
                good.add(bad),
                bad.multiply(good),
                good.multiply(bad),
                bad.multiply(2),
                bad.transpose(),
                bad.copy(),
                bad.adjugate(),
                bad.inverse(),
            ]
        for result in results:
            MatrixVerifier.assert_invalid(result, MatrixError.SINGULAR)
        assert math.isnan(bad.determinant())

    def test_invalid_never_equal(self):
        bad = Matrix.invalid(MatrixError.DIMENSION_MISMATCH)
        assert bad != bad.copy()
        assert not bad.allclose(bad)


class TestDeterminant:
    """Test cofactor-expansion determinant."""

    def test_base_cases(self):
        assert Matrix(0, 0).determinant() == 1
        assert Matrix.from_rows([[7]]).determinant() == 7
        assert Matrix.from_rows([[2, 0], [0, 3]]).determinant() == 6

    def test_two_by_two_formula(self):
        a, b, c, d = 3.5, -1.25, 2.0, 4.0
        assert Matrix.from_rows([[a, b], [c, d]]).determinant() == a * d - b * c

    def test_three_by_three(self):
        m = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert m.determinant() == -306

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_matches_numpy(self, n):
        m = random_square(n, seed=10 + n)
        assert m.determinant() == pytest.approx(np.linalg.det(m.to_numpy()), abs=1e-6)

    def test_not_square(self, caplog):
        with caplog.at_level(logging.ERROR, logger="linviz.matrix"):
            det = Matrix(2, 3).determinant()
        assert math.isnan(det)
        assert "square" in caplog.text


class TestAdjugateInverse:
    """Test adjugate and inverse."""

    def test_adjugate_two_by_two(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.adjugate().data == [[4, -2], [-3, 1]]

    def test_adjugate_identity_relation(self):
        """A adj(A) == det(A) I."""
        m = Matrix.from_rows([[2, -1, 0], [1, 3, 2], [0, 1, 4]])
        expected = Matrix.identity(3).multiply(m.determinant())
        assert m.multiply(m.adjugate()) == expected

    def test_inverse_one_by_one(self):
        assert Matrix.from_rows([[4]]).inverse() == Matrix.from_rows([[0.25]])

    def test_inverse_diagonal(self):
        inv = Matrix.from_rows([[2, 0], [0, 4]]).inverse()
        assert inv.allclose(Matrix.from_rows([[0.5, 0], [0, 0.25]]))

    @pytest.mark.parametrize(
        "rows",
        [
            [[4, 7], [2, 6]],
            [[1, 2, 3], [0, 1, 4], [5, 6, 0]],
            [[2, 0, 1, 3], [1, 1, 0, 2], [0, 3, 1, 1], [4, 1, 2, 0]],
        ],
    )
    def test_inverse_law(self, rows):
        """A A^-1 ~ I within 1e-9."""
        a = Matrix.from_rows(rows)
        n = a.rows
        assert a.multiply(a.inverse()).allclose(Matrix.identity(n), atol=1e-9)
        assert a.inverse().multiply(a).allclose(Matrix.identity(n), atol=1e-9)
        MatrixVerifier.assert_matches_numpy(a)

    def test_singular_inverse(self, caplog):
        """Singular input gives the sentinel, logs, and raises nothing."""
        with caplog.at_level(logging.ERROR, logger="linviz.matrix"):
            inv = Matrix.from_rows([[1, 2], [2, 4]]).inverse()
        MatrixVerifier.assert_invalid(inv, MatrixError.SINGULAR)
        assert any("singular" in record.message for record in caplog.records)

    def test_non_square(self, caplog):
        with caplog.at_level(logging.ERROR, logger="linviz.matrix"):
            results = [Matrix(2, 3).adjugate(), Matrix(3, 2).inverse()]
        for result in results:
            MatrixVerifier.assert_invalid(result, MatrixError.NOT_SQUARE)
        assert len(caplog.records) == 2


class TestUnwrap:
    """Test conversion of the sentinel into typed exceptions."""

    def test_valid_returns_self(self):
        m = Matrix.identity(2)
        assert m.unwrap() is m

    @pytest.mark.parametrize(
        "make,exc",
        [
            (lambda: Matrix(2, 2).add(Matrix(1, 1)), DimensionMismatchError),
            (lambda: Matrix(2, 3).inverse(), NotSquareError),
            (lambda: Matrix.from_rows([[1, 2], [2, 4]]).inverse(), SingularMatrixError),
        ],
    )
    def test_raises_typed_error(self, make, exc):
        with pytest.raises(exc):
            make().unwrap()

    def test_errors_are_value_errors(self):
        assert issubclass(MatrixAlgebraError, ValueError)
        with pytest.raises(ValueError):
            Matrix.invalid(MatrixError.SINGULAR).to_numpy()


class TestFormatting:
    """Test text output."""

    def test_to_string(self):
        m = Matrix.from_rows([[1, 0.5], [1 / 3, -2]])
        assert m.to_string() == "(1 0.5\n0.333 -2)"
        assert m.to_string(places=1) == "(1 0.5\n0.3 -2)"

    def test_to_string_invalid(self):
        assert Matrix.invalid(MatrixError.SINGULAR).to_string() == "(invalid)"

    def test_repr(self):
        assert repr(Matrix.from_rows([[1, 2]])) == "Matrix(1x2, [[1, 2]])"
        assert "invalid" in repr(Matrix.invalid(MatrixError.NOT_SQUARE))

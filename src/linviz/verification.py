"""Verification utilities comparing the matrix engine against numpy.

Example:
    >>> from linviz.verification import MatrixVerifier
    >>>
    >>> a = Matrix.from_rows([[4, 7], [2, 6]])
    >>> MatrixVerifier.assert_matches_numpy(a)
    >>> MatrixVerifier.assert_close(a @ a.inverse(), Matrix.identity(2))
"""

from __future__ import annotations

import logging

import numpy as np

from linviz.config.config import DISPLAY_CONFIG
from linviz.matrix import Matrix, MatrixError

logger = logging.getLogger(__name__)


class MatrixVerifier:
    """Assertions for engine results."""

    @staticmethod
    def assert_close(
        actual: Matrix, expected: Matrix | np.ndarray, atol: float = DISPLAY_CONFIG.tolerance
    ) -> None:
        """Assert two matrices are equal within ``atol``.

        :param actual: Engine result
        :param expected: Matrix or numpy array
        :param atol: Absolute tolerance
        :raises AssertionError: If shapes or values differ, or ``actual`` is invalid
        """
        if not actual.is_valid:
            raise AssertionError(f"Expected a valid matrix, got {actual!r}")
        expected_arr = expected.to_numpy() if isinstance(expected, Matrix) else expected
        actual_arr = actual.to_numpy()
        if actual_arr.shape != expected_arr.shape:
            raise AssertionError(f"Shape mismatch: {actual_arr.shape} vs {expected_arr.shape}")
        if not np.allclose(actual_arr, expected_arr, rtol=0.0, atol=atol):
            max_diff = float(np.max(np.abs(actual_arr - expected_arr)))
            raise AssertionError(f"Matrices differ (max diff {max_diff:.3e} > {atol:.1e})")

    @staticmethod
    def assert_invalid(matrix: Matrix, error: MatrixError | None = None) -> None:
        """Assert ``matrix`` is the invalid sentinel, optionally of a given kind.

        :raises AssertionError: If the matrix is valid or carries another error
        """
        if matrix.is_valid:
            raise AssertionError(f"Expected the invalid sentinel, got {matrix!r}")
        if not (np.isnan(matrix.rows) and np.isnan(matrix.cols)):
            raise AssertionError("Invalid matrix must have NaN rows and cols")
        if error is not None and matrix.error != error:
            raise AssertionError(f"Expected {error}, got {matrix.error}")

    @staticmethod
    def assert_matches_numpy(matrix: Matrix, atol: float = 1e-6) -> None:
        """Cross-check determinant and inverse of a square matrix with numpy.linalg.

        Singular matrices only have their determinant checked, and the
        engine must report them as singular.

        :param matrix: Square matrix
        :param atol: Absolute tolerance
        :raises AssertionError: If engine and numpy disagree
        """
        arr = matrix.to_numpy()
        det = matrix.determinant()
        expected_det = float(np.linalg.det(arr)) if arr.size else 1.0
        if not np.isclose(det, expected_det, rtol=1e-9, atol=atol):
            raise AssertionError(f"Determinant {det} differs from numpy {expected_det}")

        logger.debug("[MatrixVerifier] det=%s (numpy %s)", det, expected_det)
        if det == 0:
            MatrixVerifier.assert_invalid(matrix.inverse(), MatrixError.SINGULAR)
            return
        MatrixVerifier.assert_close(matrix.inverse(), np.linalg.inv(arr), atol=atol)

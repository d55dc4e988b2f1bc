"""Apply an ordered list of transforms to a 2xN point set.

Translations are folded additively and every other kind multiplicatively,
so points are never lifted into homogeneous coordinates. ``compose()``
collapses a list into one affine pair and ``to_homogeneous()`` gives the
equivalent 3x3 matrix for callers that want a single multiplicative form.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from linviz.config.values import TransformStep, Translate
from linviz.matrix import Matrix
from linviz.transform.api import matrix_of

logger = logging.getLogger(__name__)


def _tile_column(vector: Matrix, cols: int) -> Matrix:
    """Repeat a column vector ``cols`` times."""
    return Matrix(vector.rows, cols).map(lambda _, row, _col: vector.data[row][0])


def apply_all(points: Matrix, steps: Iterable[TransformStep]) -> Matrix:
    """Fold transforms onto a point set, left to right.

    Order matters: ``[Rotate(90), Translate(1, 0)]`` rotates first and then
    moves, while the reverse order moves first and rotates the moved points.

    :param points: Point set [2, N], row 0 = x, row 1 = y
    :param steps: Transforms in application order
    :returns: New transformed point set, or the invalid sentinel if any step
        failed (e.g. a point set without two rows)
    """
    result = points.copy()
    for step in steps:
        matrix = matrix_of(step)
        if isinstance(step, Translate):
            if result.is_valid:
                matrix = _tile_column(matrix, result.cols)
            result = result.add(matrix)
        else:
            result = matrix.multiply(result)

    if not result.is_valid:
        logger.debug("[Transform] Fold produced an invalid point set (%s)", result.error)
    return result


def compose(steps: Iterable[TransformStep]) -> tuple[Matrix, Matrix]:
    """Collapse transforms into one affine map ``p -> linear @ p + offset``.

    :param steps: Transforms in application order
    :returns: Tuple of (linear 2x2, offset 2x1)
    """
    linear = Matrix.identity(2)
    offset = Matrix(2, 1)
    for step in steps:
        matrix = matrix_of(step)
        if isinstance(step, Translate):
            offset = offset.add(matrix)
        else:
            linear = matrix.multiply(linear)
            offset = matrix.multiply(offset)
    return linear, offset


def to_homogeneous(steps: Iterable[TransformStep]) -> Matrix:
    """Equivalent 3x3 homogeneous matrix of a transform list.

    :param steps: Transforms in application order
    :returns: Matrix ``[[a, b, tx], [c, d, ty], [0, 0, 1]]``
    """
    linear, offset = compose(steps)
    if not (linear.is_valid and offset.is_valid):
        return linear if not linear.is_valid else offset

    def cell(_, row, col):
        if row == 2:
            return 1 if col == 2 else 0
        if col == 2:
            return offset.data[row][0]
        return linear.data[row][col]

    return Matrix(3, 3).map(cell)

"""Shapes as 2xN point sets.

Vertices are stored column-wise (row 0 = x, row 1 = y) so a linear map
is applied by left-multiplying the point matrix.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from linviz.config.values import TransformStep
from linviz.matrix import Matrix
from linviz.protocols import Renderer
from linviz.transform.apply import apply_all

logger = logging.getLogger(__name__)


def _to_points(points: Matrix | Sequence[Sequence[float]]) -> Matrix:
    if isinstance(points, Matrix):
        return points
    if len(points) == 0:
        return Matrix(2, 0)
    return Matrix.from_rows(points).transpose()


class Shape:
    """A polygon given by its vertices.

    :param points: 2xN Matrix, or a sequence of ``[x, y]`` pairs
    :raises ValueError: If the point matrix does not have exactly two rows
    """

    def __init__(self, points: Matrix | Sequence[Sequence[float]]):
        points = _to_points(points)
        if not points.is_valid or points.rows != 2:
            raise ValueError(f"Shape points must be a 2xN matrix, got {points!r}")
        self.points = points

    def copy(self) -> Shape:
        """Create an independent copy of the shape."""
        return Shape(self.points.copy())

    def add_points(self, points: Matrix | Sequence[Sequence[float]]) -> None:
        """Append vertices in place.

        :param points: 2xM Matrix, or a sequence of ``[x, y]`` pairs
        """
        extra = _to_points(points)
        if extra.rows != 2:
            raise ValueError(f"Added points must be a 2xM matrix, got {extra!r}")
        for row in range(2):
            self.points.data[row].extend(extra.data[row])
        self.points.cols += extra.cols

    def transform(self, matrix: Matrix) -> Shape:
        """Left-multiply the points by a 2x2 matrix.

        :param matrix: Linear map
        :returns: New Shape
        :raises ValueError: If the product is invalid (matrix is not 2x2)
        """
        return Shape(matrix.multiply(self.points))

    def apply(self, steps: Iterable[TransformStep]) -> Shape:
        """Apply transforms in order, leaving this shape untouched.

        :param steps: Transforms in application order
        :returns: New transformed Shape
        """
        return Shape(apply_all(self.points, steps).unwrap())

    def vertices(self) -> list[tuple[float, float]]:
        """Vertices as ``(x, y)`` tuples."""
        xs, ys = self.points.data
        return list(zip(xs, ys, strict=True))

    def outline(self, scale: float = 1.0) -> list[tuple[float, float]]:
        """Closed polyline of the vertices multiplied by ``scale``.

        :param scale: Drawing scale (world units to pixels)
        :returns: Vertices with the first one repeated at the end
        """
        vertices = [(x * scale, y * scale) for x, y in self.vertices()]
        if vertices:
            vertices.append(vertices[0])
        return vertices

    def draw(self, renderer: Renderer, scale: float = 1.0) -> None:
        """Hand the scaled outline to a renderer."""
        if len(self) == 0:
            logger.debug("[Shape] Nothing to draw")
            return
        renderer.draw_polygon(self.outline(scale))

    def __len__(self) -> int:
        """Return number of vertices."""
        return self.points.cols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.points == other.points

    __hash__ = None

    def __repr__(self) -> str:
        return f"Shape({self.vertices()})"

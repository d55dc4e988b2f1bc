"""
Protocol definitions for collaborators outside the algebra core.

The package never draws anything itself. A renderer (canvas, plotting
library, test double) receives closed outlines in world coordinates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from linviz.matrix import Matrix


@runtime_checkable
class Renderer(Protocol):
    """Protocol for anything that can draw a shape outline."""

    def draw_polygon(self, points: Sequence[tuple[float, float]]) -> None:
        """
        Draw a closed polygon.

        :param points: Vertices in drawing order; the first vertex is
            repeated at the end
        """
        ...


@runtime_checkable
class PointTransform(Protocol):
    """Protocol for objects that map a 2xN point set to a new one."""

    def apply(self, target: Matrix) -> Matrix:
        """Apply the transform, leaving ``target`` untouched."""
        ...

"""Ordered, editable transform list with a fluent API.

Example:
    >>> from linviz import TransformChain, TransformKind, get_shape_preset
    >>>
    >>> chain = TransformChain().rotate(90).translate(1, 0).scale(2, 2)
    >>> moved = chain(get_shape_preset("triangle"))
    >>>
    >>> # Editor changes the second step into a shear (parameters reset)
    >>> chain.set_kind(1, TransformKind.SHEAR)
    >>> chain[1].kx = 0.5
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from linviz.config.values import (
    Custom,
    Reflect,
    Reflection,
    Rotate,
    Scale,
    Shear,
    TransformKind,
    TransformStep,
    Translate,
)
from linviz.matrix import Matrix
from linviz.transform.api import change_kind, default_transform
from linviz.transform.apply import apply_all, compose, to_homogeneous

if TYPE_CHECKING:
    from linviz.shape import Shape

logger = logging.getLogger(__name__)


@dataclass
class TransformChain:
    """Ordered list of transforms applied left to right.

    Nothing is cached: every call folds the current list again, so edits
    made directly on the stored dataclasses are always picked up.
    """

    _steps: list[TransformStep] = field(default_factory=list)

    # ========================================================================
    # Builders
    # ========================================================================

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> TransformChain:
        """Add translation.

        :param dx: Offset along x
        :param dy: Offset along y
        :returns: Self for chaining
        """
        return self.append(Translate(dx, dy))

    def scale(self, sx: float = 1.0, sy: float | None = None) -> TransformChain:
        """Add scaling.

        :param sx: Factor along x
        :param sy: Factor along y, defaults to ``sx``
        :returns: Self for chaining
        """
        return self.append(Scale(sx, sx if sy is None else sy))

    def reflect(self, axis: Reflection = Reflection.NONE) -> TransformChain:
        """Add reflection.

        :param axis: Reflection axis
        :returns: Self for chaining
        """
        return self.append(Reflect(axis))

    def rotate(self, degrees: float = 0.0) -> TransformChain:
        """Add counter-clockwise rotation.

        :param degrees: Rotation angle in degrees
        :returns: Self for chaining
        """
        return self.append(Rotate(degrees))

    def shear(self, kx: float = 0.0, ky: float = 0.0) -> TransformChain:
        """Add shear.

        :param kx: x += kx * y
        :param ky: y += ky * x
        :returns: Self for chaining
        """
        return self.append(Shear(kx, ky))

    def custom(self, matrix: Matrix | list[list[float]]) -> TransformChain:
        """Add an arbitrary 2x2 linear map.

        :param matrix: 2x2 Matrix or nested rows
        :returns: Self for chaining
        """
        return self.append(Custom(matrix))

    def append(self, step: TransformStep) -> TransformChain:
        """Add a transform, or a default one when given a kind.

        :param step: Transform dataclass or TransformKind
        :returns: Self for chaining
        """
        if isinstance(step, TransformKind):
            step = default_transform(step)
        self._steps.append(step)
        return self

    # ========================================================================
    # Editing
    # ========================================================================

    def pop(self, index: int = -1) -> TransformStep:
        """Remove and return a transform (the last one by default).

        :raises IndexError: If the chain is empty
        """
        return self._steps.pop(index)

    def set_kind(self, index: int, kind: TransformKind) -> TransformStep:
        """Change the kind of the transform at ``index``.

        Switching kind replaces the parameters with the new kind's defaults.

        :param index: Position in the chain
        :param kind: New kind
        :returns: The transform now stored at ``index``
        """
        self._steps[index] = change_kind(self._steps[index], kind)
        logger.debug("[TransformChain] Step %d is now %s", index, self._steps[index].describe())
        return self._steps[index]

    def reset(self) -> TransformChain:
        """Clear all transforms.

        :returns: Self for chaining
        """
        self._steps.clear()
        return self

    def clone(self) -> TransformChain:
        """Create a copy of the chain.

        :returns: New TransformChain holding independent copies of the transforms
        """
        return TransformChain([copy.deepcopy(step) for step in self._steps])

    # ========================================================================
    # Execution
    # ========================================================================

    def apply(self, target: Shape | Matrix) -> Shape | Matrix:
        """Apply the chain to a Shape or a 2xN point matrix.

        :param target: Shape or point set, left untouched
        :returns: New transformed object of the same type
        """
        if isinstance(target, Matrix):
            return apply_all(target, self._steps)
        return target.apply(self._steps)

    def __call__(self, target: Shape | Matrix) -> Shape | Matrix:
        return self.apply(target)

    def compose(self) -> tuple[Matrix, Matrix]:
        """Effective affine map as (linear 2x2, offset 2x1)."""
        return compose(self._steps)

    def to_homogeneous(self) -> Matrix:
        """Effective affine map as one 3x3 homogeneous matrix."""
        return to_homogeneous(self._steps)

    def is_neutral(self) -> bool:
        """Check if every transform is an identity."""
        return all(step.is_neutral() for step in self._steps)

    def describe(self) -> list[str]:
        """One line per transform, e.g. ``["Rotate: 90", "Translate: (1, 0)"]``."""
        return [step.describe() for step in self._steps]

    def __getitem__(self, index: int) -> TransformStep:
        return self._steps[index]

    def __iter__(self) -> Iterator[TransformStep]:
        return iter(self._steps)

    def __len__(self) -> int:
        """Return number of transforms."""
        return len(self._steps)

    def __repr__(self) -> str:
        """Return string representation."""
        ops = [step.kind.label for step in self._steps]
        return f"TransformChain([{', '.join(ops)}])"

"""Transform value dataclasses, one per transform kind.

Each kind carries a fixed payload, so a Scale always has exactly two
factors and a Rotate exactly one angle. The dataclasses are mutable so
an editor can write new parameter values into them between recomputes.

Example:
    >>> steps = [Rotate(90), Translate(1, 0)]
    >>> [step.describe() for step in steps]
    ['Rotate: 90', 'Translate: (1, 0)']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, TypeAlias

from linviz.config.config import DISPLAY_CONFIG, TRANSFORM_CONFIG
from linviz.matrix import Matrix, _format_number


class TransformKind(IntEnum):
    """Closed set of transform kinds."""

    TRANSLATE = 0
    SCALE = 1
    REFLECT = 2
    ROTATE = 3
    SHEAR = 4
    CUSTOM = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Reflection(IntEnum):
    """Axis choices for a reflection."""

    NONE = 0
    X_AXIS = 1
    Y_AXIS = 2
    X_AND_Y_AXES = 3
    POSITIVE_DIAGONAL = 4
    NEGATIVE_DIAGONAL = 5

    @property
    def label(self) -> str:
        return _REFLECTION_LABELS[self]


_REFLECTION_LABELS = {
    Reflection.NONE: "None",
    Reflection.X_AXIS: "X-Axis",
    Reflection.Y_AXIS: "Y-Axis",
    Reflection.X_AND_Y_AXES: "X and Y Axes",
    Reflection.POSITIVE_DIAGONAL: "Positive Diagonal",
    Reflection.NEGATIVE_DIAGONAL: "Negative Diagonal",
}


def _fmt(value: float) -> str:
    return _format_number(value, DISPLAY_CONFIG.decimal_places)


@dataclass
class Translate:
    """Translation by (dx, dy). Applied additively to a point set."""

    kind: ClassVar[TransformKind] = TransformKind.TRANSLATE

    dx: float = TRANSFORM_CONFIG.translate_offset.default
    dy: float = TRANSFORM_CONFIG.translate_offset.default

    def parameters(self) -> list[float]:
        return [self.dx, self.dy]

    def describe(self) -> str:
        return f"{self.kind.label}: ({_fmt(self.dx)}, {_fmt(self.dy)})"

    def is_neutral(self) -> bool:
        spec = TRANSFORM_CONFIG.translate_offset
        return spec.is_neutral(self.dx) and spec.is_neutral(self.dy)


@dataclass
class Scale:
    """Axis-aligned scaling by (sx, sy)."""

    kind: ClassVar[TransformKind] = TransformKind.SCALE

    sx: float = TRANSFORM_CONFIG.scale_factor.default
    sy: float = TRANSFORM_CONFIG.scale_factor.default

    def parameters(self) -> list[float]:
        return [self.sx, self.sy]

    def describe(self) -> str:
        return f"{self.kind.label}: ({_fmt(self.sx)}, {_fmt(self.sy)})"

    def is_neutral(self) -> bool:
        spec = TRANSFORM_CONFIG.scale_factor
        return spec.is_neutral(self.sx) and spec.is_neutral(self.sy)


@dataclass
class Reflect:
    """Reflection across an axis, both axes, or a diagonal."""

    kind: ClassVar[TransformKind] = TransformKind.REFLECT

    axis: Reflection = Reflection.NONE

    def __post_init__(self):
        self.axis = Reflection(self.axis)

    def parameters(self) -> list[Reflection]:
        return [self.axis]

    def describe(self) -> str:
        return f"{self.kind.label}: {self.axis.label}"

    def is_neutral(self) -> bool:
        return self.axis == Reflection.NONE


@dataclass
class Rotate:
    """Counter-clockwise rotation about the origin, angle in degrees."""

    kind: ClassVar[TransformKind] = TransformKind.ROTATE

    angle: float = TRANSFORM_CONFIG.rotation_angle.default

    def parameters(self) -> list[float]:
        return [self.angle]

    def describe(self) -> str:
        return f"{self.kind.label}: {_fmt(self.angle)}"

    def is_neutral(self) -> bool:
        # Full turns are not neutral here; the angle is shown to the user as typed
        return TRANSFORM_CONFIG.rotation_angle.is_neutral(self.angle)


@dataclass
class Shear:
    """Shear with x += kx * y and y += ky * x."""

    kind: ClassVar[TransformKind] = TransformKind.SHEAR

    kx: float = TRANSFORM_CONFIG.shear_factor.default
    ky: float = TRANSFORM_CONFIG.shear_factor.default

    def parameters(self) -> list[float]:
        return [self.kx, self.ky]

    def describe(self) -> str:
        return f"{self.kind.label}: ({_fmt(self.kx)}, {_fmt(self.ky)})"

    def is_neutral(self) -> bool:
        spec = TRANSFORM_CONFIG.shear_factor
        return spec.is_neutral(self.kx) and spec.is_neutral(self.ky)


@dataclass
class Custom:
    """Arbitrary user-supplied 2x2 linear map."""

    kind: ClassVar[TransformKind] = TransformKind.CUSTOM

    matrix: Matrix = field(default_factory=lambda: Matrix.identity(2))

    def __post_init__(self):
        if not isinstance(self.matrix, Matrix):
            self.matrix = Matrix.from_rows(self.matrix)
        if self.matrix.shape != (2, 2):
            raise ValueError(f"Custom transform needs a 2x2 matrix, got {self.matrix!r}")

    def parameters(self) -> Matrix:
        return self.matrix

    def describe(self) -> str:
        return f"{self.kind.label}: {self.matrix.to_string(DISPLAY_CONFIG.decimal_places)}"

    def is_neutral(self) -> bool:
        return self.matrix.allclose(Matrix.identity(2), DISPLAY_CONFIG.tolerance)


TransformStep: TypeAlias = Translate | Scale | Reflect | Rotate | Shear | Custom

STEP_TYPES: dict[TransformKind, type] = {
    TransformKind.TRANSLATE: Translate,
    TransformKind.SCALE: Scale,
    TransformKind.REFLECT: Reflect,
    TransformKind.ROTATE: Rotate,
    TransformKind.SHEAR: Shear,
    TransformKind.CUSTOM: Custom,
}

"""Preset library for shapes and transforms.

Provides the demo shapes and a few named transforms, with support for
converting transforms to and from plain dictionaries (the form an editor
sends and receives).
"""

from __future__ import annotations

import copy
import logging
from dataclasses import fields

from linviz.config.values import (
    STEP_TYPES,
    Custom,
    Reflect,
    Reflection,
    Rotate,
    Scale,
    TransformKind,
    TransformStep,
)
from linviz.matrix import Matrix
from linviz.shape import Shape
from linviz.transform.api import default_parameters, transform_from_parameters

logger = logging.getLogger(__name__)

# ============================================================================
# Shape Presets
# ============================================================================

TRIANGLE = Shape([[0, 0], [32, 0], [16, 32]])
SQUARE = Shape([[0, 0], [32, 0], [32, 32], [0, 32]])
PENTAGON = Shape([[0, 16], [8, 0], [24, 0], [32, 16], [16, 32]])
HEXAGON = Shape([[0, 16], [8, 0], [24, 0], [32, 16], [24, 32], [8, 32]])
HEPTAGON = Shape([[0, 8], [8, 0], [24, 0], [32, 8], [32, 24], [16, 32], [0, 24]])
OCTAGON = Shape([[0, 8], [8, 0], [24, 0], [32, 8], [32, 24], [24, 32], [8, 32], [0, 24]])
HOURGLASS = Shape([[8, 0], [24, 0], [16, 16], [24, 32], [8, 32], [16, 16]])
STAR = Shape([[0, 16], [12, 12], [16, 0], [20, 12], [32, 16], [20, 20], [16, 32], [12, 20]])

# ============================================================================
# Transform Presets
# ============================================================================

IDENTITY = Scale()
DOUBLE_SIZE = Scale(2.0, 2.0)
HALF_SIZE = Scale(0.5, 0.5)

FLIP_X = Reflect(Reflection.X_AXIS)
FLIP_Y = Reflect(Reflection.Y_AXIS)
FLIP_ORIGIN = Reflect(Reflection.X_AND_Y_AXES)

QUARTER_TURN = Rotate(90.0)
HALF_TURN = Rotate(180.0)

# ============================================================================
# Preset Registry
# ============================================================================

SHAPE_PRESETS: dict[str, Shape] = {
    "triangle": TRIANGLE,
    "square": SQUARE,
    "pentagon": PENTAGON,
    "hexagon": HEXAGON,
    "heptagon": HEPTAGON,
    "octagon": OCTAGON,
    "hourglass": HOURGLASS,
    "star": STAR,
}

TRANSFORM_PRESETS: dict[str, TransformStep] = {
    "identity": IDENTITY,
    "double_size": DOUBLE_SIZE,
    "half_size": HALF_SIZE,
    "flip_x": FLIP_X,
    "flip_y": FLIP_Y,
    "flip_origin": FLIP_ORIGIN,
    "quarter_turn": QUARTER_TURN,
    "half_turn": HALF_TURN,
}

# ============================================================================
# Loading Functions
# ============================================================================


def get_shape_preset(name: str) -> Shape:
    """Get a copy of a shape preset by name.

    :param name: Preset name (case-insensitive)
    :returns: Independent Shape copy, safe to edit
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in SHAPE_PRESETS:
        available = ", ".join(SHAPE_PRESETS.keys())
        raise KeyError(f"Unknown shape preset '{name}'. Available: {available}")
    return SHAPE_PRESETS[name_lower].copy()


def get_transform_preset(name: str) -> TransformStep:
    """Get a copy of a transform preset by name.

    :param name: Preset name (case-insensitive)
    :returns: Independent transform copy, safe to edit
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in TRANSFORM_PRESETS:
        available = ", ".join(TRANSFORM_PRESETS.keys())
        raise KeyError(f"Unknown transform preset '{name}'. Available: {available}")
    return copy.deepcopy(TRANSFORM_PRESETS[name_lower])


# ============================================================================
# Dict Conversion
# ============================================================================


def transform_from_dict(d: dict) -> TransformStep:
    """Create a transform from a dictionary.

    The ``kind`` key names the transform (case-insensitive label or the
    integer kind value); the remaining keys are its fields. Missing fields
    keep their defaults and unknown keys are ignored.

    Example:
        >>> transform_from_dict({"kind": "rotate", "angle": 90})
        Rotate(angle=90.0)
        >>> transform_from_dict({"kind": "reflect", "axis": "x_axis"})
        Reflect(axis=<Reflection.X_AXIS: 1>)

    :param d: Dictionary with a ``kind`` key
    :returns: Transform dataclass
    :raises ValueError: If the kind is missing or unknown, or a field is not a number
    """
    if "kind" not in d:
        raise ValueError(f"Transform dict needs a 'kind' key, got {sorted(d)}")
    kind = _parse_kind(d["kind"])

    if kind == TransformKind.CUSTOM:
        if "matrix" not in d:
            return Custom()
        return Custom(Matrix.from_rows(d["matrix"]))
    if kind == TransformKind.REFLECT:
        axis = d.get("axis", Reflection.NONE)
        if isinstance(axis, str):
            axis = Reflection[axis.upper()]
        return Reflect(axis)

    names = [f.name for f in fields(STEP_TYPES[kind])]
    defaults = default_parameters(kind)
    return transform_from_parameters(
        kind, [d.get(name, default) for name, default in zip(names, defaults, strict=True)]
    )


def transform_to_dict(step: TransformStep) -> dict:
    """Convert a transform to a dictionary.

    :param step: Transform dataclass
    :returns: Dictionary representation
    """
    if isinstance(step, Custom):
        return {"kind": step.kind.name.lower(), "matrix": step.matrix.to_list()}
    if isinstance(step, Reflect):
        return {"kind": step.kind.name.lower(), "axis": step.axis.name.lower()}
    d = {"kind": step.kind.name.lower()}
    d.update({f.name: getattr(step, f.name) for f in fields(step)})
    return d


def _parse_kind(value: str | int) -> TransformKind:
    if isinstance(value, str):
        try:
            return TransformKind[value.upper()]
        except KeyError:
            available = ", ".join(kind.name.lower() for kind in TransformKind)
            raise ValueError(f"Unknown transform kind '{value}'. Available: {available}") from None
    return TransformKind(value)

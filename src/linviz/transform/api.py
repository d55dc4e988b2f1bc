"""
2D transform matrices.

Functions:

- ``default_parameters()`` / ``default_transform()``: canonical identity values per kind.
- ``transform_from_parameters()``: build a typed transform from a plain parameter vector.
- ``change_kind()``: switch a transform to another kind, resetting its parameters.
- ``matrix_of()``: the 2x2 linear matrix (or 2x1 translation vector) of a transform.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from linviz.config.config import TRANSFORM_CONFIG
from linviz.config.values import (
    STEP_TYPES,
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

logger = logging.getLogger(__name__)

_PARAMETER_SPECS = {
    TransformKind.TRANSLATE: (TRANSFORM_CONFIG.translate_offset,) * 2,
    TransformKind.SCALE: (TRANSFORM_CONFIG.scale_factor,) * 2,
    TransformKind.ROTATE: (TRANSFORM_CONFIG.rotation_angle,),
    TransformKind.SHEAR: (TRANSFORM_CONFIG.shear_factor,) * 2,
}

_REFLECTION_MATRICES = {
    Reflection.NONE: ((1, 0), (0, 1)),
    Reflection.X_AXIS: ((1, 0), (0, -1)),
    Reflection.Y_AXIS: ((-1, 0), (0, 1)),
    Reflection.X_AND_Y_AXES: ((-1, 0), (0, -1)),
    Reflection.POSITIVE_DIAGONAL: ((0, 1), (1, 0)),
    Reflection.NEGATIVE_DIAGONAL: ((0, -1), (-1, 0)),
}


# ============================================================================
# Defaults and construction
# ============================================================================


def default_parameters(kind: TransformKind) -> list | Matrix:
    """Canonical identity parameters for a transform kind.

    :param kind: Transform kind
    :returns: ``[0, 0]`` for translate/shear, ``[1, 1]`` for scale,
        ``[Reflection.NONE]`` for reflect, ``[0]`` for rotate and the 2x2
        identity matrix for custom
    """
    kind = TransformKind(kind)
    if kind == TransformKind.REFLECT:
        return [Reflection.NONE]
    if kind == TransformKind.CUSTOM:
        return Matrix.identity(2)
    return [spec.default for spec in _PARAMETER_SPECS[kind]]


def default_transform(kind: TransformKind) -> TransformStep:
    """Create a transform of ``kind`` holding its default parameters."""
    return transform_from_parameters(kind, default_parameters(kind))


def transform_from_parameters(
    kind: TransformKind, parameters: Sequence | Matrix, clamp: bool = False
) -> TransformStep:
    """Create a typed transform from a plain parameter vector.

    :param kind: Transform kind
    :param parameters: Parameter vector of the arity the kind expects, or a
        2x2 matrix (or nested rows) for custom transforms
    :param clamp: If True, clamp scalar parameters to their configured ranges
    :returns: Transform dataclass for ``kind``
    :raises ValueError: If the arity or a parameter value is wrong
    """
    kind = TransformKind(kind)
    if kind == TransformKind.CUSTOM:
        matrix = parameters if isinstance(parameters, Matrix) else Matrix.from_rows(parameters)
        return Custom(matrix.copy())

    expected = 1 if kind == TransformKind.REFLECT else len(_PARAMETER_SPECS[kind])
    if len(parameters) != expected:
        raise ValueError(
            f"{kind.label} expects {expected} parameter(s), got {len(parameters)}"
        )

    if kind == TransformKind.REFLECT:
        return Reflect(Reflection(parameters[0]))

    values = [
        spec.validate(value, clamp=clamp)
        for spec, value in zip(_PARAMETER_SPECS[kind], parameters, strict=True)
    ]
    return STEP_TYPES[kind](*values)


def change_kind(step: TransformStep, kind: TransformKind) -> TransformStep:
    """Switch a transform to another kind.

    Parameters never carry over between kinds: the result holds the new
    kind's defaults. Asking for the current kind returns ``step`` unchanged.
    """
    kind = TransformKind(kind)
    if step.kind == kind:
        return step
    return default_transform(kind)


# ============================================================================
# Matrix building
# ============================================================================


def _build_translation_vector(dx: float, dy: float) -> Matrix:
    """Build 2x1 translation column."""
    return Matrix.from_rows([[dx], [dy]])


def _build_scale_matrix(sx: float, sy: float) -> Matrix:
    """Build 2x2 diagonal scale matrix."""
    return Matrix.from_rows([[sx, 0], [0, sy]])


def _build_rotation_matrix(degrees: float) -> Matrix:
    """Build 2x2 counter-clockwise rotation matrix."""
    theta = np.radians(degrees)
    c, s = float(np.cos(theta)), float(np.sin(theta))
    return Matrix.from_rows([[c, -s], [s, c]])


def _build_shear_matrix(kx: float, ky: float) -> Matrix:
    """Build 2x2 shear matrix."""
    return Matrix.from_rows([[1, kx], [ky, 1]])


def _build_reflection_matrix(axis: Reflection) -> Matrix:
    """Build one of the six fixed reflection matrices."""
    return Matrix.from_rows(_REFLECTION_MATRICES[Reflection(axis)])


def matrix_of(step: TransformStep) -> Matrix:
    """Matrix representing a transform.

    Translations give a 2x1 column that is added to points; every other
    kind gives a 2x2 matrix that left-multiplies them.

    :param step: Transform dataclass
    :returns: New Matrix (never aliases the transform's own data)
    """
    if isinstance(step, Translate):
        return _build_translation_vector(step.dx, step.dy)
    elif isinstance(step, Scale):
        return _build_scale_matrix(step.sx, step.sy)
    elif isinstance(step, Reflect):
        return _build_reflection_matrix(step.axis)
    elif isinstance(step, Rotate):
        return _build_rotation_matrix(step.angle)
    elif isinstance(step, Shear):
        return _build_shear_matrix(step.kx, step.ky)
    elif isinstance(step, Custom):
        return step.matrix.copy()

    logger.warning("[Transform] Unrecognized transform %r, using identity", step)
    return Matrix.identity(2)

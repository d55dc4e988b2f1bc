"""
linviz - 2D linear algebra visualizer core

A small dense-matrix engine and a transform pipeline for an interactive
linear-algebra teaching tool. Drawing is left to a renderer; this package
computes what gets drawn.

Features:
- Matrix engine: map, copy, transpose, add/subtract/multiply, determinant
  (cofactor expansion), adjugate, inverse
- Failures never raise: an invalid matrix with NaN dimensions is returned
  and a diagnostic is logged (``Matrix.unwrap()`` opts into exceptions)
- Transforms: translate, scale, reflect, rotate, shear, custom 2x2
- Ordered fold with additive translation and multiplicative linear steps
- Preset shapes (triangle ... star) and transforms

Example - Matrix engine:
    >>> from linviz import Matrix
    >>> a = Matrix.from_rows([[2, 0], [0, 3]])
    >>> a.determinant()
    6
    >>> a.inverse().to_string()
    '(0.5 0\\n0 0.333)'

Example - Transform chain:
    >>> from linviz import TransformChain, get_shape_preset
    >>>
    >>> chain = TransformChain().translate(1, 0).scale(2, 2)
    >>> moved = chain(get_shape_preset("square"))
"""

__version__ = "0.1.0"

from linviz.config import (
    CONFIG,
    DOUBLE_SIZE,
    FLIP_ORIGIN,
    FLIP_X,
    FLIP_Y,
    HALF_SIZE,
    HALF_TURN,
    IDENTITY,
    QUARTER_TURN,
    SHAPE_PRESETS,
    TRANSFORM_PRESETS,
    Custom,
    Reflect,
    Reflection,
    Rotate,
    Scale,
    Shear,
    TransformKind,
    TransformStep,
    Translate,
    get_shape_preset,
    get_transform_preset,
    transform_from_dict,
    transform_to_dict,
)
from linviz.demo import ExampleOperations, example_operations
from linviz.matrix import (
    DimensionMismatchError,
    Matrix,
    MatrixAlgebraError,
    MatrixError,
    NotSquareError,
    SingularMatrixError,
)
from linviz.protocols import PointTransform, Renderer
from linviz.shape import Shape
from linviz.transform import (
    TransformChain,
    apply_all,
    change_kind,
    compose,
    default_parameters,
    default_transform,
    matrix_of,
    to_homogeneous,
    transform_from_parameters,
)
from linviz.verification import MatrixVerifier

__all__ = [
    # Matrix engine
    "Matrix",
    "MatrixError",
    "MatrixAlgebraError",
    "DimensionMismatchError",
    "NotSquareError",
    "SingularMatrixError",
    # Transforms
    "TransformKind",
    "Reflection",
    "TransformStep",
    "Translate",
    "Scale",
    "Reflect",
    "Rotate",
    "Shear",
    "Custom",
    "TransformChain",
    "apply_all",
    "change_kind",
    "compose",
    "default_parameters",
    "default_transform",
    "matrix_of",
    "to_homogeneous",
    "transform_from_parameters",
    # Shapes
    "Shape",
    # Presets
    "SHAPE_PRESETS",
    "TRANSFORM_PRESETS",
    "IDENTITY",
    "DOUBLE_SIZE",
    "HALF_SIZE",
    "FLIP_X",
    "FLIP_Y",
    "FLIP_ORIGIN",
    "QUARTER_TURN",
    "HALF_TURN",
    "get_shape_preset",
    "get_transform_preset",
    "transform_from_dict",
    "transform_to_dict",
    # Config
    "CONFIG",
    # Protocols
    "Renderer",
    "PointTransform",
    # Demo and verification
    "ExampleOperations",
    "example_operations",
    "MatrixVerifier",
    # Version
    "__version__",
]

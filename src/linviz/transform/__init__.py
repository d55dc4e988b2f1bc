"""
2D transform module - typed transforms, their matrices, and the fold.

Example:
    >>> from linviz.transform import TransformChain
    >>> chain = TransformChain().translate(1, 0).rotate(90).scale(2)
    >>> points = chain(shape.points)
"""

from linviz.transform.api import (
    change_kind,
    default_parameters,
    default_transform,
    matrix_of,
    transform_from_parameters,
)
from linviz.transform.apply import apply_all, compose, to_homogeneous
from linviz.transform.pipeline import TransformChain

__all__ = [
    "TransformChain",
    "apply_all",
    "change_kind",
    "compose",
    "default_parameters",
    "default_transform",
    "matrix_of",
    "to_homogeneous",
    "transform_from_parameters",
]

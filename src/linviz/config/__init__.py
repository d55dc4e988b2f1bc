"""Configuration module for linviz.

This module provides the parameter specifications for every transform
kind, the display settings, the typed transform values and the presets.

Usage:
    from linviz.config import CONFIG
    CONFIG.transform.scale_factor.neutral  # 1.0
    CONFIG.display.decimal_places  # 3
"""

from linviz.config.config import (
    CONFIG,
    DISPLAY_CONFIG,
    TRANSFORM_CONFIG,
    LinvizConfig,
)
from linviz.config.display import DisplayConfig
from linviz.config.operations import OperationSpec
from linviz.config.presets import (
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
    get_shape_preset,
    get_transform_preset,
    transform_from_dict,
    transform_to_dict,
)
from linviz.config.transform import TransformConfig
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

__all__ = [
    # Configuration
    "CONFIG",
    "DISPLAY_CONFIG",
    "TRANSFORM_CONFIG",
    "DisplayConfig",
    "LinvizConfig",
    "OperationSpec",
    "TransformConfig",
    # Values
    "Custom",
    "Reflect",
    "Reflection",
    "Rotate",
    "Scale",
    "Shear",
    "TransformKind",
    "TransformStep",
    "Translate",
    # Presets
    "DOUBLE_SIZE",
    "FLIP_ORIGIN",
    "FLIP_X",
    "FLIP_Y",
    "HALF_SIZE",
    "HALF_TURN",
    "IDENTITY",
    "QUARTER_TURN",
    "SHAPE_PRESETS",
    "TRANSFORM_PRESETS",
    "get_shape_preset",
    "get_transform_preset",
    "transform_from_dict",
    "transform_to_dict",
]

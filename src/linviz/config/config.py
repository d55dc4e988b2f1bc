"""Unified linviz configuration.

This module provides a top-level configuration dataclass that contains
the transform parameter specs and the display settings as sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass

from linviz.config.display import DisplayConfig
from linviz.config.transform import TransformConfig


@dataclass(frozen=True)
class LinvizConfig:
    """Top-level configuration.

    Provides hierarchical access:
        CONFIG.transform.rotation_angle
        CONFIG.display.decimal_places

    Attributes:
        transform: Transform parameter specifications
        display: Formatting and comparison settings
    """

    transform: TransformConfig = TransformConfig()
    display: DisplayConfig = DisplayConfig()

    def get_all_specs(self) -> dict[str, dict]:
        """Get all settings organized by section.

        :return: Nested dictionary of all specifications
        """
        return {
            "transform": self.transform.get_all_specs(),
            "display": self.display.get_all_specs(),
        }


# Main singleton instance
CONFIG = LinvizConfig()

TRANSFORM_CONFIG = CONFIG.transform
DISPLAY_CONFIG = CONFIG.display

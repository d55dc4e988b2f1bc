"""Transform parameter configuration.

This module defines the standardized parameter specifications for the
scalar parameters of every transform kind. Defaults and neutral values
used by the transform pipeline come from here.
"""

from __future__ import annotations

from dataclasses import dataclass

from linviz.config.operations import OperationSpec


@dataclass(frozen=True)
class TransformConfig:
    """Configuration for all transform parameters.

    Reflect and Custom carry an axis choice and a matrix respectively,
    so only the scalar parameters are defined here.
    """

    translate_offset: OperationSpec = OperationSpec(
        name="translate_offset",
        min_value=-1000.0,
        max_value=1000.0,
        default=0.0,
        neutral=0.0,
        description="Offset along one axis: 0=no movement",
    )

    scale_factor: OperationSpec = OperationSpec(
        name="scale_factor",
        min_value=-1000.0,
        max_value=1000.0,
        default=1.0,
        neutral=1.0,
        description="Scale multiplier along one axis: 1.0=no change",
    )

    rotation_angle: OperationSpec = OperationSpec(
        name="rotation_angle",
        min_value=-360.0,
        max_value=360.0,
        default=0.0,
        neutral=0.0,
        description="Counter-clockwise rotation angle in degrees: 0=no rotation",
    )

    shear_factor: OperationSpec = OperationSpec(
        name="shear_factor",
        min_value=-100.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        description="Shear coefficient: 0=no shear",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation spec by name.

        :param name: Parameter name
        :return: OperationSpec for the parameter
        :raises AttributeError: If parameter not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs as a dictionary.

        :return: Dictionary mapping parameter names to specs
        """
        return {
            "translate_offset": self.translate_offset,
            "scale_factor": self.scale_factor,
            "rotation_angle": self.rotation_angle,
            "shear_factor": self.shear_factor,
        }


# Singleton instance for use throughout the codebase
TRANSFORM_CONFIG = TransformConfig()

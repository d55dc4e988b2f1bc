"""Display configuration for formatted matrices and comparisons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayConfig:
    """Formatting and comparison settings shared by the package.

    Attributes:
        decimal_places: Places kept when matrices and transforms are formatted
        tolerance: Absolute tolerance for approximate matrix comparison
    """

    decimal_places: int = 3
    tolerance: float = 1e-9

    def get_all_specs(self) -> dict[str, float]:
        return {"decimal_places": self.decimal_places, "tolerance": self.tolerance}


DISPLAY_CONFIG = DisplayConfig()

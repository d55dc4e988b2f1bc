"""Parameter specifications for scalar transform parameters.

An ``OperationSpec`` gives one parameter its accepted range, the value a
fresh transform starts with, and the value at which it leaves points
unchanged. Editors validate typed-in values through it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationSpec:
    """Range, default and neutral value of one transform parameter.

    Attributes:
        name: Parameter name (e.g., "scale_factor", "rotation_angle")
        min_value: Lower bound applied by ``validate(clamp=True)``
        max_value: Upper bound applied by ``validate(clamp=True)``
        default: Value a freshly created transform starts with
        neutral: Value at which the parameter leaves points unchanged
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    default: float
    neutral: float
    description: str = ""

    def validate(self, value: float, clamp: bool = False) -> float:
        """Check that a parameter value is a real number.

        :param value: Value typed into the editor
        :param clamp: If True, pull the value into [min_value, max_value]
        :returns: Value as float
        :raises ValueError: If value is not a number (booleans included)
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        if clamp:
            return max(self.min_value, min(self.max_value, float(value)))
        return float(value)

    def is_neutral(self, value: float, tolerance: float = 1e-9) -> bool:
        """True if ``value`` is within ``tolerance`` of the neutral value."""
        return abs(value - self.neutral) < tolerance

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default}, neutral={self.neutral})"
        )

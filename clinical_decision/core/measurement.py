"""Validated vital-sign measurement."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .errors import DomainError
from .result import Err, Ok, Result
from .vitals import VITAL_SIGNS, MeasurementType, VitalSignDefinition, lookup

__all__ = ["Measurement"]


@dataclass(frozen=True)
class Measurement:
    """A ``(kind, value)`` pair that satisfies its kind's physiological range.

    Build instances with :meth:`create`, which reports bad input as a
    ``DomainError``. Constructing one directly with an out-of-range value is
    a programming error and raises ``ValueError``.
    """

    kind: MeasurementType
    value: int

    def __post_init__(self) -> None:
        definition = lookup(self.kind)
        if definition is not None and not definition.physiological_range.contains(self.value):
            raise ValueError(f"{definition.code} must be {definition.describe_range()}, got {self.value}")

    @classmethod
    def create(
        cls,
        kind: MeasurementType,
        value: int,
        field: str = "value",
        *,
        catalog: Mapping[MeasurementType, VitalSignDefinition] = VITAL_SIGNS,
    ) -> Result["Measurement", DomainError]:
        definition = lookup(kind, catalog)
        if definition is None:
            return Err(
                DomainError.validation(
                    f"{kind.value}_OUT_OF_RANGE",
                    f"Measurement type '{kind.value}' has no configured valid range.",
                    field=field,
                )
            )
        if not definition.physiological_range.contains(value):
            return Err(
                DomainError.validation(
                    definition.out_of_range_error_code,
                    f"{definition.code} must be {definition.describe_range()}.",
                    field=field,
                )
            )
        return Ok(cls(kind, value))

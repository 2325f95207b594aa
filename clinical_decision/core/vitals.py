"""Vital-sign catalog: supported measurement kinds and their valid ranges."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import DomainError
from .result import Err, Ok, Result

__all__ = [
    "MeasurementType",
    "RangeRule",
    "VitalSignDefinition",
    "VITAL_SIGNS",
    "SUPPORTED_CODES",
    "lookup",
    "lookup_by_code",
    "parse_code",
    "to_code",
]


class MeasurementType(str, Enum):
    """Closed set of measurement kinds; the value is the canonical code."""

    TEMPERATURE = "TEMP"
    HEART_RATE = "HR"
    RESPIRATORY_RATE = "RR"

    def to_code(self) -> str:
        return self.value


@dataclass(frozen=True)
class RangeRule:
    """Half-open integer interval ``(min_exclusive, max_inclusive]``."""

    min_exclusive: int
    max_inclusive: int

    def contains(self, value: int) -> bool:
        return self.min_exclusive < value <= self.max_inclusive

    def __str__(self) -> str:
        return f"> {self.min_exclusive} and <= {self.max_inclusive}"


@dataclass(frozen=True)
class VitalSignDefinition:
    kind: MeasurementType
    code: str
    display_name: str
    physiological_range: RangeRule
    out_of_range_error_code: str

    def describe_range(self) -> str:
        return str(self.physiological_range)


def _definition(kind: MeasurementType, display_name: str, low: int, high: int) -> VitalSignDefinition:
    return VitalSignDefinition(
        kind=kind,
        code=kind.value,
        display_name=display_name,
        physiological_range=RangeRule(low, high),
        out_of_range_error_code=f"{kind.value}_OUT_OF_RANGE",
    )


VITAL_SIGNS: Mapping[MeasurementType, VitalSignDefinition] = MappingProxyType(
    {
        MeasurementType.TEMPERATURE: _definition(MeasurementType.TEMPERATURE, "Body temperature", 31, 42),
        MeasurementType.HEART_RATE: _definition(MeasurementType.HEART_RATE, "Heart rate", 25, 220),
        MeasurementType.RESPIRATORY_RATE: _definition(MeasurementType.RESPIRATORY_RATE, "Respiratory rate", 3, 60),
    }
)

_BY_CODE: Mapping[str, VitalSignDefinition] = MappingProxyType(
    {definition.code: definition for definition in VITAL_SIGNS.values()}
)

SUPPORTED_CODES: Tuple[str, ...] = tuple(_BY_CODE)


def to_code(kind: MeasurementType) -> str:
    return kind.to_code()


def lookup(
    kind: MeasurementType,
    catalog: Mapping[MeasurementType, VitalSignDefinition] = VITAL_SIGNS,
) -> Optional[VitalSignDefinition]:
    return catalog.get(kind)


def lookup_by_code(code: str) -> Optional[VitalSignDefinition]:
    """Exact, case-sensitive lookup by canonical code."""

    return _BY_CODE.get(code)


def parse_code(code: Optional[str], field: Optional[str] = None) -> Result[MeasurementType, DomainError]:
    """Resolve a raw type code into a ``MeasurementType``.

    Blank codes and anything that is not exactly a canonical code (``"temp"``
    included) are rejected; no case folding or trimming takes place.
    """

    if code is None or not code.strip():
        return Err(
            DomainError.validation(
                "MEASUREMENT_TYPE_REQUIRED",
                "Measurement type is required.",
                field=field,
            )
        )
    definition = lookup_by_code(code)
    if definition is None:
        return Err(
            DomainError.validation(
                "MEASUREMENT_TYPE_INVALID",
                f"Measurement type must be one of: {', '.join(SUPPORTED_CODES)}.",
                field=field,
            )
        )
    return Ok(definition.kind)

"""Scoring model registry and the engine that dispatches to it."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type

from ..errors import DomainError
from ..measurement import Measurement
from ..result import Err, Ok, Result
from ..vitals import MeasurementType, RangeRule

__all__ = [
    "ScoreBand",
    "ScoringModel",
    "BandedScoringModel",
    "DuplicateModelError",
    "ScoringEngine",
    "register",
    "registered_models",
    "default_engine",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBand:
    range: RangeRule
    score: int

    def matches(self, value: int) -> bool:
        return self.range.contains(value)


class DuplicateModelError(ValueError):
    """Two scoring models were configured with the same identifier."""


class ScoringModel(ABC):
    """A clinical score computed from one measurement per required kind."""

    model_id: str = ""

    @property
    @abstractmethod
    def required_vital_signs(self) -> Tuple[MeasurementType, ...]:
        """Kinds this model scores, in evaluation order, without duplicates."""

    @abstractmethod
    def score(self, kind: MeasurementType, value: int) -> Tuple[bool, int]:
        """Return ``(matched, sub_score)`` for a single value."""

    @abstractmethod
    def calculate(self, measurements: Mapping[MeasurementType, Measurement]) -> Result[int, DomainError]:
        """Sum the sub-scores; completeness is checked by the engine."""


class BandedScoringModel(ScoringModel):
    """Model whose sub-scores come from contiguous per-kind band tables.

    Subclasses only declare ``bands``. The first matching band wins; bands for
    a kind are expected to cover its whole physiological range.
    """

    bands: Mapping[MeasurementType, Sequence[ScoreBand]] = MappingProxyType({})

    @property
    def required_vital_signs(self) -> Tuple[MeasurementType, ...]:
        return tuple(self.bands)

    def score(self, kind: MeasurementType, value: int) -> Tuple[bool, int]:
        for band in self.bands.get(kind, ()):
            if band.matches(value):
                return True, band.score
        return False, 0

    def calculate(self, measurements: Mapping[MeasurementType, Measurement]) -> Result[int, DomainError]:
        total = 0
        for kind in self.required_vital_signs:
            measurement = measurements[kind]
            matched, sub_score = self.score(kind, measurement.value)
            if not matched:
                logger.error(
                    "%s has no scoring band for %s value %s", self.model_id, kind.value, measurement.value
                )
                return Err(
                    DomainError.unexpected(
                        "SCORING_RULE_MISMATCH",
                        f"No scoring band configured for {kind.value} value {measurement.value}.",
                    )
                )
            total += sub_score
        return Ok(total)


_REGISTRY: Dict[str, Type[ScoringModel]] = {}


def register(model_id: str) -> Callable[[Type[ScoringModel]], Type[ScoringModel]]:
    def decorator(cls: Type[ScoringModel]) -> Type[ScoringModel]:
        if model_id in _REGISTRY:
            raise DuplicateModelError(f"Scoring model '{model_id}' is already registered")
        cls.model_id = model_id
        _REGISTRY[model_id] = cls
        return cls

    return decorator


def registered_models() -> List[ScoringModel]:
    return [cls() for cls in _REGISTRY.values()]


class ScoringEngine:
    """Validates a measurement set against a model, then delegates to it.

    Stateless after construction; safe to share between concurrent requests.
    """

    def __init__(self, models: Iterable[ScoringModel]):
        models_by_id: Dict[str, ScoringModel] = {}
        for model in models:
            if model.model_id in models_by_id:
                raise DuplicateModelError(f"Scoring model '{model.model_id}' is configured more than once")
            models_by_id[model.model_id] = model
        self._models_by_id = models_by_id

    def model_ids(self) -> List[str]:
        return list(self._models_by_id)

    def get(self, model_id: str) -> Optional[ScoringModel]:
        return self._models_by_id.get(model_id)

    def calculate(self, model_id: str, measurements: Iterable[Measurement]) -> Result[int, DomainError]:
        model = self._models_by_id.get(model_id)
        if model is None:
            return Err(
                DomainError.not_found(
                    "SCORING_MODEL_NOT_FOUND",
                    f"Scoring model '{model_id}' was not found.",
                )
            )

        provided: Dict[MeasurementType, List[Measurement]] = defaultdict(list)
        for measurement in measurements:
            provided[measurement.kind].append(measurement)

        # Missing/duplicate per required kind first, extras only afterwards.
        for kind in model.required_vital_signs:
            entries = provided.get(kind)
            if not entries:
                return Err(
                    DomainError.validation(
                        "MEASUREMENT_MISSING",
                        f"Missing required measurement type '{kind.value}'.",
                        field="measurements",
                    )
                )
            if len(entries) > 1:
                return Err(
                    DomainError.validation(
                        "MEASUREMENT_DUPLICATE",
                        f"Measurement type '{kind.value}' must be provided exactly once.",
                        field="measurements",
                    )
                )

        if len(provided) != len(model.required_vital_signs):
            return Err(
                DomainError.validation(
                    "MEASUREMENT_TYPE_UNSUPPORTED",
                    "Unsupported measurement type provided.",
                    field="measurements",
                )
            )

        by_kind = {kind: entries[0] for kind, entries in provided.items()}
        try:
            result = model.calculate(by_kind)
        except Exception as exc:
            logger.error("%s raised while scoring", model_id, exc_info=True)
            return Err(DomainError.from_exception(exc).wrap(f"Scoring model '{model_id}'"))
        if result.is_ok():
            logger.debug("%s score computed: %s", model_id, result.value)
        return result


@lru_cache
def default_engine() -> ScoringEngine:
    return ScoringEngine(registered_models())

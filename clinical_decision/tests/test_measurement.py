import pytest

from clinical_decision.core.errors import DomainErrorType
from clinical_decision.core.measurement import Measurement
from clinical_decision.core.scores import default_engine
from clinical_decision.core.vitals import VITAL_SIGNS, MeasurementType

TEMP = MeasurementType.TEMPERATURE
HR = MeasurementType.HEART_RATE
RR = MeasurementType.RESPIRATORY_RATE


@pytest.mark.parametrize(
    "kind, value, ok",
    [
        (TEMP, 31, False), (TEMP, 32, True), (TEMP, 37, True), (TEMP, 42, True), (TEMP, 43, False),
        (HR, 25, False), (HR, 26, True), (HR, 70, True), (HR, 220, True), (HR, 221, False),
        (RR, 3, False), (RR, 4, True), (RR, 15, True), (RR, 60, True), (RR, 61, False),
    ],
)
def test_create_validates_physiological_range(kind, value, ok):
    result = Measurement.create(kind, value)
    assert result.is_ok() is ok
    if ok:
        assert (result.value.kind, result.value.value) == (kind, value)
    else:
        assert result.error.type is DomainErrorType.VALIDATION


def test_out_of_range_error_details():
    result = Measurement.create(TEMP, 99, field="measurements[0].value")
    assert result.error.code == "TEMP_OUT_OF_RANGE"
    assert result.error.message == "TEMP must be > 31 and <= 42."
    assert result.error.field == "measurements[0].value"


def test_kind_missing_from_catalog():
    partial = {kind: d for kind, d in VITAL_SIGNS.items() if kind is not RR}
    result = Measurement.create(RR, 15, catalog=partial)
    assert result.error.code == "RR_OUT_OF_RANGE"
    assert "RR" in result.error.message


def test_measurement_is_immutable():
    measurement = Measurement.create(HR, 80).unwrap()
    with pytest.raises(AttributeError):
        measurement.value = 81


@pytest.mark.parametrize("kind, value", [(TEMP, 999), (HR, 25), (RR, 61)])
def test_direct_construction_rejects_out_of_range(kind, value):
    with pytest.raises(ValueError):
        Measurement(kind, value)


def test_engine_never_sees_unvalidated_measurement():
    with pytest.raises(ValueError):
        default_engine().calculate(
            "NEWS",
            [Measurement(TEMP, 999), Measurement.create(HR, 60).unwrap(), Measurement.create(RR, 15).unwrap()],
        )

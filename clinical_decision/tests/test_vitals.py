import pytest

from clinical_decision.core.vitals import (
    SUPPORTED_CODES,
    VITAL_SIGNS,
    MeasurementType,
    RangeRule,
    lookup,
    lookup_by_code,
    parse_code,
    to_code,
)


def test_range_rule_bounds():
    rule = RangeRule(10, 20)
    assert not rule.contains(10)
    assert rule.contains(11)
    assert rule.contains(15)
    assert rule.contains(20)
    assert not rule.contains(21)
    assert str(rule) == "> 10 and <= 20"


@pytest.mark.parametrize("kind", list(MeasurementType))
def test_physiological_range_edges(kind):
    rule = VITAL_SIGNS[kind].physiological_range
    assert not rule.contains(rule.min_exclusive)
    assert rule.contains(rule.min_exclusive + 1)
    assert rule.contains(rule.max_inclusive)
    assert not rule.contains(rule.max_inclusive + 1)


@pytest.mark.parametrize(
    "kind, code, low, high, error_code",
    [
        (MeasurementType.TEMPERATURE, "TEMP", 31, 42, "TEMP_OUT_OF_RANGE"),
        (MeasurementType.HEART_RATE, "HR", 25, 220, "HR_OUT_OF_RANGE"),
        (MeasurementType.RESPIRATORY_RATE, "RR", 3, 60, "RR_OUT_OF_RANGE"),
    ],
)
def test_catalog_entries(kind, code, low, high, error_code):
    definition = lookup(kind)
    assert definition.code == code
    assert definition.physiological_range == RangeRule(low, high)
    assert definition.out_of_range_error_code == error_code


@pytest.mark.parametrize("kind", list(MeasurementType))
def test_code_round_trip(kind):
    assert parse_code(to_code(kind)).unwrap() is kind
    assert lookup_by_code(kind.to_code()).kind is kind


def test_supported_codes_order():
    assert SUPPORTED_CODES == ("TEMP", "HR", "RR")


@pytest.mark.parametrize("code", ["temp", "Hr", "rr", "SPO2", " TEMP"])
def test_parse_rejects_non_canonical_codes(code):
    result = parse_code(code, field="measurements[0].type")
    assert result.is_err()
    assert result.error.code == "MEASUREMENT_TYPE_INVALID"
    assert result.error.message == "Measurement type must be one of: TEMP, HR, RR."
    assert result.error.field == "measurements[0].type"


@pytest.mark.parametrize("code", [None, "", "   "])
def test_parse_requires_code(code):
    result = parse_code(code)
    assert result.error.code == "MEASUREMENT_TYPE_REQUIRED"

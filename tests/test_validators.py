from data_prep.validators import validate_inputs
from engine.parameters import InputParameters


def test_defaults_pass_cleanly():
    vr = validate_inputs(InputParameters())
    assert vr.is_valid
    assert vr.warnings == []
    assert vr.summary() == "✓ All checks passed."


def test_negative_values_are_errors():
    vr = validate_inputs(InputParameters(baseline_flush_volume=-1, water_unit_cost=-2.0))
    assert not vr.is_valid
    assert len(vr.errors) == 2
    assert any("baseline_flush_volume" in e for e in vr.errors)
    assert "ERRORS (2):" in vr.summary()


def test_non_finite_is_error():
    vr = validate_inputs(InputParameters(inflation_rate_percent=float("nan")))
    assert not vr.is_valid
    assert "inflation_rate_percent" in vr.errors[0]


def test_sewer_share_above_100_is_error():
    vr = validate_inputs(InputParameters(sewer_billed_percent=120))
    assert not vr.is_valid
    assert "sewer_billed_percent" in vr.errors[0]


def test_option_not_saving_water_warns():
    vr = validate_inputs(InputParameters(option_b_volume=10.0))
    assert vr.is_valid
    assert len(vr.warnings) == 1
    assert vr.warnings[0].startswith("PAST")


def test_zero_usage_warns():
    vr = validate_inputs(InputParameters(weeks_per_year=0))
    assert vr.is_valid
    assert any("zero" in w for w in vr.warnings)


def test_fractional_and_out_of_range_usage_warns():
    vr = validate_inputs(InputParameters(uses_per_day=120.5, days_per_week=8))
    assert vr.is_valid
    assert any("uses_per_day" in w for w in vr.warnings)
    assert any("days_per_week exceeds 7" in w for w in vr.warnings)

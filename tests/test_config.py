"""Tests for configuration parsing."""

import pytest

from nutri_score.config import parse_score_type, parse_validation_rules
from nutri_score.domain.nutrition import ScoreType
from nutri_score.domain.validation import default_validation_rules
from nutri_score.services.validator import InputValidator
from tests.conftest import make_data


def test_parse_validation_rules_defaults() -> None:
    assert parse_validation_rules(None) == default_validation_rules()
    assert parse_validation_rules("") == default_validation_rules()


def test_parse_validation_rules_overrides() -> None:
    rules = parse_validation_rules("energy=0:5000, sodium=10:2000")

    assert rules["energy"] == (0.0, 5000.0)
    assert rules["sodium"] == (10.0, 2000.0)
    assert rules["sugars"] == (0.0, 100.0)


def test_parse_validation_rules_skips_malformed_chunks() -> None:
    rules = parse_validation_rules("bogus=1:2,energy=abc:1,protein=5:1,fibre,sugars")

    assert rules == default_validation_rules()


def test_parse_validation_rules_skips_non_finite_bounds() -> None:
    rules = parse_validation_rules("energy=nan:nan,sodium=0:inf,fibre=-inf:10")

    assert rules == default_validation_rules()


def test_non_finite_overrides_keep_validation_active() -> None:
    validator = InputValidator(rules=parse_validation_rules("energy=nan:nan"))

    errors = validator.validate(make_data(energy=-500))

    assert [error.field for error in errors] == ["energy"]


def test_parse_score_type() -> None:
    assert parse_score_type(None) is ScoreType.FOOD
    assert parse_score_type(" ") is ScoreType.FOOD
    assert parse_score_type("Beverage") is ScoreType.BEVERAGE
    with pytest.raises(ValueError, match="juice"):
        parse_score_type("juice")

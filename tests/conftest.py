"""Shared test fixtures."""

import pytest

from nutri_score.config import Settings
from nutri_score.containers import AppContainer, build_container
from nutri_score.domain.nutrition import NutritionalData
from nutri_score.services.comparison import ComparisonService
from nutri_score.services.scoring import ScoringService


def make_data(**overrides: float) -> NutritionalData:
    """Build a nutrient profile that is all zeros unless overridden."""
    values = {
        "energy": 0.0,
        "sugars": 0.0,
        "saturated_fatty_acids": 0.0,
        "sodium": 0.0,
        "fruits": 0.0,
        "fibre": 0.0,
        "protein": 0.0,
    }
    values.update(overrides)
    return NutritionalData(**values)


MAX_DATA = make_data(
    energy=4000,
    sugars=100,
    saturated_fatty_acids=100,
    sodium=10000,
    fruits=100,
    fibre=50,
    protein=100,
)


def nutrients_json(data: NutritionalData) -> dict[str, float]:
    """Serialize a profile the way API clients send it."""
    return data.as_dict()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        debug=False,
        validation_rules=None,
        default_score_type="food",
        environment="test",
    )


@pytest.fixture
def scoring_service() -> ScoringService:
    return ScoringService()


@pytest.fixture
def comparison_service(scoring_service: ScoringService) -> ComparisonService:
    return ComparisonService(scoring_service)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)

"""Tests for the comparison service."""

import pytest

from nutri_score.domain.comparison import ComparisonItem
from nutri_score.domain.nutrition import ScoreType
from nutri_score.domain.validation import ScoreValidationError
from nutri_score.services.comparison import ComparisonService
from tests.conftest import make_data

APPLE = ComparisonItem(
    name="Apple",
    data=make_data(energy=200, sugars=10, fruits=100, fibre=2.4, protein=0.3),
)
COLA = ComparisonItem(
    name="Cola",
    data=make_data(energy=180, sugars=10.6, sodium=10),
    score_type=ScoreType.BEVERAGE,
)
CHOCOLATE = ComparisonItem(
    name="Milk chocolate",
    data=make_data(
        energy=2300,
        sugars=48,
        saturated_fatty_acids=19,
        sodium=40,
        fibre=7,
        protein=6.5,
    ),
)


def test_compare_ranks_best_first(comparison_service: ComparisonService) -> None:
    comparison = comparison_service.compare([CHOCOLATE, APPLE, COLA])

    assert [analysis.name for analysis in comparison.analyses] == [
        "Apple",
        "Cola",
        "Milk chocolate",
    ]
    assert [analysis.score.value for analysis in comparison.analyses] == [-5, 2, 17]
    assert comparison.best.name == "Apple"
    assert comparison.worst.name == "Milk chocolate"


def test_compare_keeps_input_order_for_ties(
    comparison_service: ComparisonService,
) -> None:
    first = ComparisonItem(name="Still water", data=make_data(), score_type="water")
    second = ComparisonItem(
        name="Sparkling water", data=make_data(), score_type="water"
    )

    comparison = comparison_service.compare([first, second])

    assert [analysis.name for analysis in comparison.analyses] == [
        "Still water",
        "Sparkling water",
    ]


def test_compare_empty(comparison_service: ComparisonService) -> None:
    comparison = comparison_service.compare([])

    assert comparison.analyses == []
    assert comparison.best is None
    assert comparison.worst is None
    assert comparison_service.summary(comparison) == "No foods compared."


def test_compare_collects_errors_by_item(
    comparison_service: ComparisonService,
) -> None:
    bad_energy = ComparisonItem(name="Broken", data=make_data(energy=-1))
    bad_type = ComparisonItem(name="Snack", data=make_data(), score_type="snack")

    with pytest.raises(ScoreValidationError) as exc_info:
        comparison_service.compare([APPLE, bad_energy, bad_type])

    assert exc_info.value.fields == ["items[1].energy", "items[2].score_type"]


def test_summary_lists_ranking(comparison_service: ComparisonService) -> None:
    comparison = comparison_service.compare([APPLE, CHOCOLATE])

    summary = comparison_service.summary(comparison)

    assert summary.splitlines() == [
        "Compared 2 foods:",
        "1. Apple: A (-5)",
        "2. Milk chocolate: D (17)",
        "Best choice: Apple",
        "Worst choice: Milk chocolate",
    ]

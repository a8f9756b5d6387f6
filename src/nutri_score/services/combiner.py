"""Category rules merging negative and positive points into a final score."""

from collections.abc import Callable
from dataclasses import dataclass

from nutri_score.domain.nutrition import NegativePoints, PositivePoints, ScoreType

MAX_BEVERAGE_FRUIT_POINTS = 5


@dataclass(frozen=True)
class CombinedScore:
    """Final score with the point totals that were counted."""

    value: int
    negative: int
    positive: int


def combine_water(negative: NegativePoints, positive: PositivePoints) -> CombinedScore:
    return CombinedScore(value=0, negative=0, positive=0)


def combine_food(negative: NegativePoints, positive: PositivePoints) -> CombinedScore:
    return CombinedScore(
        value=negative.total - positive.total,
        negative=negative.total,
        positive=positive.total,
    )


def combine_cheese(negative: NegativePoints, positive: PositivePoints) -> CombinedScore:
    """Cheese keeps protein points regardless of the negative total."""
    return CombinedScore(
        value=negative.total - positive.total,
        negative=negative.total,
        positive=positive.total,
    )


def combine_beverage(
    negative: NegativePoints, positive: PositivePoints
) -> CombinedScore:
    """Beverages only count fruit/vegetable/nut points."""
    counted = min(positive.fruits, MAX_BEVERAGE_FRUIT_POINTS)
    return CombinedScore(
        value=negative.total - counted,
        negative=negative.total,
        positive=counted,
    )


CombineRule = Callable[[NegativePoints, PositivePoints], CombinedScore]

RULES: dict[ScoreType, CombineRule] = {
    ScoreType.FOOD: combine_food,
    ScoreType.BEVERAGE: combine_beverage,
    ScoreType.WATER: combine_water,
    ScoreType.CHEESE: combine_cheese,
}

_missing_rules = set(ScoreType) - set(RULES)
if _missing_rules:
    raise RuntimeError(f"No combine rule for score types: {sorted(_missing_rules)}")


def combine(
    score_type: ScoreType, negative: NegativePoints, positive: PositivePoints
) -> CombinedScore:
    """Apply the rule registered for the score type."""
    return RULES[score_type](negative, positive)

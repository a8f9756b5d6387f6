"""Domain models for comparing scored foods."""

from dataclasses import dataclass

from nutri_score.domain.nutrition import NutritionalData, NutritionalScore, ScoreType


@dataclass(frozen=True)
class ComparisonItem:
    """A named nutrient profile to be scored alongside others."""

    name: str
    data: NutritionalData
    score_type: ScoreType | str = ScoreType.FOOD


@dataclass(frozen=True)
class FoodAnalysis:
    """Score computed for one compared item."""

    name: str
    score: NutritionalScore


@dataclass(frozen=True)
class FoodComparison:
    """Analyses ranked from best to worst score."""

    analyses: list[FoodAnalysis]
    best: FoodAnalysis | None
    worst: FoodAnalysis | None

"""Scoring service computing nutritional scores and grades."""

import logging
from dataclasses import dataclass, field

from nutri_score.domain.nutrition import (
    NutritionalData,
    NutritionalScore,
    ScoreType,
)
from nutri_score.domain.validation import ScoreValidationError, ValidationError
from nutri_score.services.combiner import combine
from nutri_score.services.grades import grade_for_score, grade_thresholds
from nutri_score.services.points import negative_points, positive_points
from nutri_score.services.validator import InputValidator, coerce_score_type

_logger = logging.getLogger(__name__)

WATER_SCORE = NutritionalScore(
    value=0,
    grade="A",
    positive=0,
    negative=0,
    score_type=ScoreType.WATER,
)


@dataclass
class ScoringService:
    """Validates nutrient profiles and turns them into scores."""

    validator: InputValidator = field(default_factory=InputValidator)
    debug: bool = False

    def calculate(
        self, data: NutritionalData, score_type: ScoreType | str = ScoreType.FOOD
    ) -> NutritionalScore:
        """Score a nutrient profile, raising ScoreValidationError on bad input."""
        errors = self.validator.validate_score_type(score_type) + self.validate(data)
        if errors:
            if self.debug:
                _logger.warning(
                    "Scoring rejected: fields=%s",
                    ",".join(error.field for error in errors),
                )
            raise ScoreValidationError(errors)

        resolved_type = coerce_score_type(score_type)
        if resolved_type is ScoreType.WATER:
            return WATER_SCORE

        negative = negative_points(data)
        positive = positive_points(data)
        combined = combine(resolved_type, negative, positive)
        score = NutritionalScore(
            value=combined.value,
            grade=grade_for_score(combined.value),
            positive=combined.positive,
            negative=combined.negative,
            score_type=resolved_type,
            negative_points=negative,
            positive_points=positive,
        )
        if self.debug:
            _logger.info(
                "Scored %s: value=%s grade=%s negative=%s positive=%s",
                resolved_type.value,
                score.value,
                score.grade,
                score.negative,
                score.positive,
            )
        return score

    def validate(self, data: NutritionalData) -> list[ValidationError]:
        """Return validation errors for a nutrient profile."""
        return self.validator.validate(data)

    def grade(self, score: int) -> str:
        """Return the letter grade for a final score."""
        return grade_for_score(score)

    def grade_thresholds(self) -> dict[str, int]:
        """Return grade boundaries for display."""
        return grade_thresholds()

"""Comparison of several foods by nutritional score."""

import logging
from dataclasses import dataclass, replace

from nutri_score.domain.comparison import ComparisonItem, FoodAnalysis, FoodComparison
from nutri_score.domain.validation import ScoreValidationError, ValidationError
from nutri_score.services.scoring import ScoringService

_logger = logging.getLogger(__name__)


@dataclass
class ComparisonService:
    """Scores a batch of foods and ranks them."""

    scoring_service: ScoringService
    debug: bool = False

    def compare(self, items: list[ComparisonItem]) -> FoodComparison:
        """Score every item and rank the results, best first."""
        analyses: list[FoodAnalysis] = []
        errors: list[ValidationError] = []
        for index, item in enumerate(items):
            try:
                score = self.scoring_service.calculate(item.data, item.score_type)
            except ScoreValidationError as exc:
                errors.extend(
                    replace(error, field=f"items[{index}].{error.field}")
                    for error in exc.errors
                )
                continue
            analyses.append(FoodAnalysis(name=item.name, score=score))
        if errors:
            raise ScoreValidationError(errors)

        ranked = self.rank(analyses)
        if self.debug:
            _logger.info("Compared %s foods", len(ranked))
        return FoodComparison(
            analyses=ranked,
            best=ranked[0] if ranked else None,
            worst=ranked[-1] if ranked else None,
        )

    @staticmethod
    def rank(analyses: list[FoodAnalysis]) -> list[FoodAnalysis]:
        """Order analyses by score value; ties keep their input order."""
        return sorted(analyses, key=lambda analysis: analysis.score.value)

    @staticmethod
    def summary(comparison: FoodComparison) -> str:
        """Format a short human-readable summary of a comparison."""
        if not comparison.analyses:
            return "No foods compared."
        lines = [f"Compared {len(comparison.analyses)} foods:"]
        for position, analysis in enumerate(comparison.analyses, start=1):
            lines.append(
                f"{position}. {analysis.name}: {analysis.score.grade} "
                f"({analysis.score.value})"
            )
        if comparison.best and comparison.worst and len(comparison.analyses) > 1:
            lines.append(f"Best choice: {comparison.best.name}")
            lines.append(f"Worst choice: {comparison.worst.name}")
        return "\n".join(lines)

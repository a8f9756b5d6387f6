"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutri_score.config import Settings, parse_score_type, parse_validation_rules
from nutri_score.domain.nutrition import ScoreType
from nutri_score.services.comparison import ComparisonService
from nutri_score.services.scoring import ScoringService
from nutri_score.services.validator import InputValidator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    validator: InputValidator
    scoring_service: ScoringService
    comparison_service: ComparisonService
    default_score_type: ScoreType


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    validator = InputValidator(
        rules=parse_validation_rules(resolved_settings.validation_rules)
    )
    scoring_service = ScoringService(
        validator=validator,
        debug=resolved_settings.debug,
    )
    comparison_service = ComparisonService(
        scoring_service=scoring_service,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        validator=validator,
        scoring_service=scoring_service,
        comparison_service=comparison_service,
        default_score_type=parse_score_type(resolved_settings.default_score_type),
    )

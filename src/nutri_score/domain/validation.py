"""Domain models for nutrient validation."""

from dataclasses import dataclass

NUTRIENT_FIELDS = (
    "energy",
    "sugars",
    "saturated_fatty_acids",
    "sodium",
    "fruits",
    "fibre",
    "protein",
)

ValidationRules = dict[str, tuple[float, float]]


def default_validation_rules() -> ValidationRules:
    """Return the default acceptable range for each nutrient field."""
    return {
        "energy": (0.0, 4000.0),
        "sugars": (0.0, 100.0),
        "saturated_fatty_acids": (0.0, 100.0),
        "sodium": (0.0, 10000.0),
        "fruits": (0.0, 100.0),
        "fibre": (0.0, 50.0),
        "protein": (0.0, 100.0),
    }


@dataclass(frozen=True)
class ValidationError:
    """A single field that failed validation."""

    field: str
    value: object
    message: str
    min: float | None = None
    max: float | None = None


class ScoreValidationError(ValueError):
    """Raised when a calculation is rejected by validation."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(error.message for error in self.errors))

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]

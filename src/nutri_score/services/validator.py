"""Input validation for nutrient profiles and score types."""

import math
from dataclasses import dataclass, field

from nutri_score.domain.nutrition import NutritionalData, ScoreType
from nutri_score.domain.validation import (
    NUTRIENT_FIELDS,
    ValidationError,
    ValidationRules,
    default_validation_rules,
)

_FIELD_LABELS = {
    "energy": ("Energy", " kJ per 100g"),
    "sugars": ("Sugar content", " g per 100g"),
    "saturated_fatty_acids": ("Saturated fat content", " g per 100g"),
    "sodium": ("Sodium content", " mg per 100g"),
    "fruits": ("Fruits/vegetables/nuts percentage", "%"),
    "fibre": ("Fibre content", " g per 100g"),
    "protein": ("Protein content", " g per 100g"),
}


def coerce_score_type(value: object) -> ScoreType | None:
    """Return the ScoreType for an enum member or its name, if recognised."""
    if isinstance(value, ScoreType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ScoreType(value.strip().lower())
    except ValueError:
        return None


@dataclass
class InputValidator:
    """Checks nutrient values against per-field [min, max] rules."""

    rules: ValidationRules = field(default_factory=default_validation_rules)

    def validate(self, data: NutritionalData) -> list[ValidationError]:
        """Return every field of the profile that falls outside its range."""
        errors: list[ValidationError] = []
        values = data.as_dict()
        for name in NUTRIENT_FIELDS:
            if name not in self.rules:
                continue
            minimum, maximum = self.rules[name]
            error = self.validate_range(values[name], minimum, maximum, name)
            if error:
                errors.append(error)
        return errors

    def validate_score_type(self, value: object) -> list[ValidationError]:
        """Reject anything that is not one of the known score types."""
        if coerce_score_type(value) is not None:
            return []
        allowed = ", ".join(member.value for member in ScoreType)
        return [
            ValidationError(
                field="score_type",
                value=value,
                message=f"Invalid score type: {value!r}. Must be one of {allowed}",
            )
        ]

    def validate_range(
        self, value: float, minimum: float, maximum: float, field_name: str
    ) -> ValidationError | None:
        """Check a single value against an inclusive range."""
        label, unit = _FIELD_LABELS.get(field_name, (field_name, ""))
        if isinstance(value, bool) or not isinstance(value, int | float):
            message = f"{label} must be a number"
        elif not math.isfinite(value):
            message = f"{label} must be a finite number"
        elif value < minimum:
            message = f"{label} cannot be less than {minimum:.1f}{unit}"
        elif value > maximum:
            message = f"{label} cannot exceed {maximum:.1f}{unit}"
        else:
            return None
        return ValidationError(
            field=field_name,
            value=value,
            message=message,
            min=minimum,
            max=maximum,
        )

"""Nutrition domain models."""

from dataclasses import asdict, dataclass
from enum import StrEnum


class ScoreType(StrEnum):
    """Category that selects the score combination rule."""

    FOOD = "food"
    BEVERAGE = "beverage"
    WATER = "water"
    CHEESE = "cheese"


@dataclass(frozen=True)
class NutritionalData:
    """Nutrient profile per 100g (or 100ml) of a food item."""

    energy: float
    sugars: float
    saturated_fatty_acids: float
    sodium: float
    fruits: float
    fibre: float
    protein: float

    def as_dict(self) -> dict[str, float]:
        """Return the profile keyed by field name."""
        return asdict(self)


@dataclass(frozen=True)
class NegativePoints:
    """Points from nutrients to limit."""

    energy: int
    sugars: int
    saturated_fatty_acids: int
    sodium: int

    @property
    def total(self) -> int:
        return self.energy + self.sugars + self.saturated_fatty_acids + self.sodium


@dataclass(frozen=True)
class PositivePoints:
    """Points from nutrients to encourage."""

    fruits: int
    fibre: int
    protein: int

    @property
    def total(self) -> int:
        return self.fruits + self.fibre + self.protein


NO_NEGATIVE_POINTS = NegativePoints(
    energy=0, sugars=0, saturated_fatty_acids=0, sodium=0
)
NO_POSITIVE_POINTS = PositivePoints(fruits=0, fibre=0, protein=0)


@dataclass(frozen=True)
class NutritionalScore:
    """Result of a single score calculation."""

    value: int
    grade: str
    positive: int
    negative: int
    score_type: ScoreType
    negative_points: NegativePoints = NO_NEGATIVE_POINTS
    positive_points: PositivePoints = NO_POSITIVE_POINTS

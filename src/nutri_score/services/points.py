"""Threshold tables converting nutrient values into points.

Every table is an ordered sequence of inclusive upper bounds paired with the
points awarded for values up to that bound. Values above the last bound get
the table's ceiling.
"""

from nutri_score.domain.nutrition import NegativePoints, NutritionalData, PositivePoints

PointTable = tuple[tuple[float, int], ...]

ENERGY_TABLE: PointTable = (
    (335, 0),
    (670, 1),
    (1005, 2),
    (1340, 3),
    (1675, 4),
    (2010, 5),
    (2345, 6),
    (2680, 7),
    (3015, 8),
    (3350, 9),
)
SUGARS_TABLE: PointTable = (
    (4.5, 0),
    (9, 1),
    (13.5, 2),
    (18, 3),
    (22.5, 4),
    (27, 5),
    (31, 6),
    (36, 7),
    (40, 8),
    (45, 9),
)
SATURATED_FAT_TABLE: PointTable = (
    (1, 0),
    (2, 1),
    (3, 2),
    (4, 3),
    (5, 4),
    (6, 5),
    (7, 6),
    (8, 7),
    (9, 8),
    (10, 9),
)
SODIUM_TABLE: PointTable = (
    (90, 0),
    (180, 1),
    (270, 2),
    (360, 3),
    (450, 4),
    (540, 5),
    (630, 6),
    (720, 7),
    (810, 8),
    (900, 9),
)
NEGATIVE_CEILING = 10

# No band awards 3 or 4 points; above 80% jumps straight to the ceiling.
FRUITS_TABLE: PointTable = (
    (40, 0),
    (60, 1),
    (80, 2),
)
FIBRE_TABLE: PointTable = (
    (0.9, 0),
    (1.9, 1),
    (2.8, 2),
    (3.7, 3),
    (4.7, 4),
)
PROTEIN_TABLE: PointTable = (
    (1.6, 0),
    (3.2, 1),
    (4.8, 2),
    (6.4, 3),
    (8.0, 4),
)
POSITIVE_CEILING = 5


def points_for(value: float, table: PointTable, ceiling: int) -> int:
    """Return the points of the first band whose upper bound holds the value."""
    for upper_bound, points in table:
        if value <= upper_bound:
            return points
    return ceiling


def energy_points(value: float) -> int:
    return points_for(value, ENERGY_TABLE, NEGATIVE_CEILING)


def sugars_points(value: float) -> int:
    return points_for(value, SUGARS_TABLE, NEGATIVE_CEILING)


def saturated_fat_points(value: float) -> int:
    return points_for(value, SATURATED_FAT_TABLE, NEGATIVE_CEILING)


def sodium_points(value: float) -> int:
    return points_for(value, SODIUM_TABLE, NEGATIVE_CEILING)


def fruits_points(value: float) -> int:
    return points_for(value, FRUITS_TABLE, POSITIVE_CEILING)


def fibre_points(value: float) -> int:
    return points_for(value, FIBRE_TABLE, POSITIVE_CEILING)


def protein_points(value: float) -> int:
    return points_for(value, PROTEIN_TABLE, POSITIVE_CEILING)


def negative_points(data: NutritionalData) -> NegativePoints:
    """Score energy, sugars, saturated fat and sodium."""
    return NegativePoints(
        energy=energy_points(data.energy),
        sugars=sugars_points(data.sugars),
        saturated_fatty_acids=saturated_fat_points(data.saturated_fatty_acids),
        sodium=sodium_points(data.sodium),
    )


def positive_points(data: NutritionalData) -> PositivePoints:
    """Score fruit/vegetable/nut content, fibre and protein."""
    return PositivePoints(
        fruits=fruits_points(data.fruits),
        fibre=fibre_points(data.fibre),
        protein=protein_points(data.protein),
    )

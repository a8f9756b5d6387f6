"""Letter grades for final scores."""

# Inclusive upper bound per grade, best first. Anything above the last is "E".
GRADE_BOUNDARIES: tuple[tuple[int, str], ...] = (
    (-1, "A"),
    (2, "B"),
    (10, "C"),
    (18, "D"),
)
WORST_GRADE = "E"
GRADES = ("A", "B", "C", "D", "E")


def grade_for_score(score: int) -> str:
    """Map a final score to a grade from A (best) to E (worst)."""
    for upper_bound, grade in GRADE_BOUNDARIES:
        if score <= upper_bound:
            return grade
    return WORST_GRADE


def grade_thresholds() -> dict[str, int]:
    """Return each grade's boundary; E is reported by its lower bound."""
    thresholds = {grade: upper_bound for upper_bound, grade in GRADE_BOUNDARIES}
    thresholds[WORST_GRADE] = GRADE_BOUNDARIES[-1][0] + 1
    return thresholds

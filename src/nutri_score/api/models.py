"""Pydantic models for the scoring API payloads."""

from pydantic import BaseModel, ConfigDict

from nutri_score.domain.comparison import FoodAnalysis, FoodComparison
from nutri_score.domain.nutrition import NutritionalData, NutritionalScore


class NutrientsPayload(BaseModel):
    """Nutrient values per 100g."""

    model_config = ConfigDict(allow_inf_nan=False)

    energy: float
    sugars: float
    saturated_fatty_acids: float
    sodium: float
    fruits: float
    fibre: float
    protein: float

    def to_domain(self) -> NutritionalData:
        return NutritionalData(**self.model_dump())


class ScoreRequest(BaseModel):
    """Request to score a single food."""

    nutrients: NutrientsPayload
    score_type: str | None = None


class CompareItemPayload(BaseModel):
    """One named food in a comparison request."""

    name: str
    nutrients: NutrientsPayload
    score_type: str | None = None


class CompareRequest(BaseModel):
    """Request to score and rank several foods."""

    items: list[CompareItemPayload]


class NegativePointsResponse(BaseModel):
    energy: int
    sugars: int
    saturated_fatty_acids: int
    sodium: int


class PositivePointsResponse(BaseModel):
    fruits: int
    fibre: int
    protein: int


class ScoreResponse(BaseModel):
    """Calculated score with its point breakdown."""

    value: int
    grade: str
    positive: int
    negative: int
    score_type: str
    negative_points: NegativePointsResponse
    positive_points: PositivePointsResponse

    @classmethod
    def from_score(cls, score: NutritionalScore) -> "ScoreResponse":
        return cls(
            value=score.value,
            grade=score.grade,
            positive=score.positive,
            negative=score.negative,
            score_type=score.score_type.value,
            negative_points=NegativePointsResponse(
                energy=score.negative_points.energy,
                sugars=score.negative_points.sugars,
                saturated_fatty_acids=score.negative_points.saturated_fatty_acids,
                sodium=score.negative_points.sodium,
            ),
            positive_points=PositivePointsResponse(
                fruits=score.positive_points.fruits,
                fibre=score.positive_points.fibre,
                protein=score.positive_points.protein,
            ),
        )


class AnalysisResponse(BaseModel):
    """Score for one compared food."""

    name: str
    score: ScoreResponse

    @classmethod
    def from_analysis(cls, analysis: FoodAnalysis) -> "AnalysisResponse":
        return cls(name=analysis.name, score=ScoreResponse.from_score(analysis.score))


class CompareResponse(BaseModel):
    """Ranked comparison of several foods."""

    analyses: list[AnalysisResponse]
    best: str | None = None
    worst: str | None = None
    summary: str

    @classmethod
    def from_comparison(
        cls, comparison: FoodComparison, summary: str
    ) -> "CompareResponse":
        return cls(
            analyses=[
                AnalysisResponse.from_analysis(analysis)
                for analysis in comparison.analyses
            ],
            best=comparison.best.name if comparison.best else None,
            worst=comparison.worst.name if comparison.worst else None,
            summary=summary,
        )

"""FastAPI application factory."""

import logging
import math
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from nutri_score.api.models import (
    CompareRequest,
    CompareResponse,
    ScoreRequest,
    ScoreResponse,
)
from nutri_score.app_logging import configure_logging
from nutri_score.containers import AppContainer
from nutri_score.domain.comparison import ComparisonItem
from nutri_score.domain.nutrition import ScoreType
from nutri_score.domain.validation import ScoreValidationError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(ScoreValidationError)
    async def score_validation_error(
        request: Request, exc: ScoreValidationError
    ) -> JSONResponse:
        logger.info("Rejected scoring request: %s", exc)
        return JSONResponse(
            status_code=422,
            content=error_payload(exc.errors),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/score")
    async def score(payload: ScoreRequest, request: Request) -> ScoreResponse:
        """Score a single food."""
        state_container: AppContainer = request.app.state.container
        result = state_container.scoring_service.calculate(
            payload.nutrients.to_domain(),
            _resolve_score_type(payload.score_type, state_container),
        )
        return ScoreResponse.from_score(result)

    @app.post("/compare")
    async def compare(payload: CompareRequest, request: Request) -> CompareResponse:
        """Score several foods and rank them best to worst."""
        state_container: AppContainer = request.app.state.container
        service = state_container.comparison_service
        comparison = service.compare(
            [
                ComparisonItem(
                    name=item.name,
                    data=item.nutrients.to_domain(),
                    score_type=_resolve_score_type(item.score_type, state_container),
                )
                for item in payload.items
            ]
        )
        return CompareResponse.from_comparison(comparison, service.summary(comparison))

    @app.get("/grades")
    async def grades(request: Request) -> dict[str, int]:
        """Return grade boundaries."""
        state_container: AppContainer = request.app.state.container
        return state_container.scoring_service.grade_thresholds()

    @app.get("/validation-rules")
    async def validation_rules(request: Request) -> dict[str, dict[str, float]]:
        """Return the active per-field validation bounds."""
        state_container: AppContainer = request.app.state.container
        return {
            name: {"min": minimum, "max": maximum}
            for name, (minimum, maximum) in state_container.validator.rules.items()
        }

    return app


def error_payload(errors: list[ValidationError]) -> dict[str, object]:
    """Serialize validation errors; non-finite values are reported as null."""
    entries = []
    for error in errors:
        entry = asdict(error)
        value = entry["value"]
        if isinstance(value, float) and not math.isfinite(value):
            entry["value"] = None
        entries.append(entry)
    return {"errors": jsonable_encoder(entries)}


def _resolve_score_type(raw: str | None, container: AppContainer) -> ScoreType | str:
    """Use the configured default when a request omits the score type."""
    if raw is None:
        return container.default_score_type
    return raw

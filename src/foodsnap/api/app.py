"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Annotated

from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse

from foodsnap.api.models import ProfilePayload, SuitabilityRequest
from foodsnap.app_logging import configure_logging
from foodsnap.containers import AppContainer
from foodsnap.domain.errors import (
    DetectionError,
    DetectionRateLimitedError,
    DivisionError,
    ValidationError,
)
from foodsnap.domain.profile import UserProfile
from foodsnap.services.energy import compute_energy_profile
from foodsnap.services.profiles import validate_profile
from foodsnap.services.suitability import classify_suitability


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="FoodSnap", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.exception_handler(DivisionError)
    async def handle_division_error(
        request: Request, exc: DivisionError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(DetectionError)
    async def handle_detection_error(
        request: Request, exc: DetectionError
    ) -> JSONResponse:
        if isinstance(exc, DetectionRateLimitedError):
            logger.warning("Meal detection rate limited: %s", exc)
            return JSONResponse(
                status_code=429,
                content={"detail": str(exc)},
            )
        logger.error("Meal detection failed: %s", exc, exc_info=exc)
        return JSONResponse(
            status_code=502,
            content={
                "detail": (
                    "Failed to analyze meal. The AI model may be overloaded "
                    "or the image could not be processed."
                )
            },
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/profile/validate")
    async def profile_validate(payload: ProfilePayload) -> dict[str, object]:
        """Validate a health profile and echo its normalized form."""
        profile = validate_profile(payload.model_dump())
        return {"profile": _profile_to_dict(profile)}

    @app.post("/energy")
    async def energy(payload: ProfilePayload) -> dict[str, object]:
        """Return BMR, TDEE and the per-meal target for a profile."""
        profile = validate_profile(payload.model_dump())
        return asdict(compute_energy_profile(profile))

    @app.post("/suitability")
    async def suitability(payload: SuitabilityRequest) -> dict[str, object]:
        """Classify meal calories against a target for a goal."""
        verdict = classify_suitability(
            payload.meal_total_kcal, payload.meal_target_kcal, payload.goal
        )
        return {
            "status": verdict.status.value,
            "score": verdict.score,
            "message": verdict.message,
        }

    @app.post("/analyze")
    async def analyze(  # noqa: PLR0913
        request: Request,
        image: Annotated[UploadFile, File()],
        sex: Annotated[str, Form()],
        age: Annotated[str, Form()],
        height_cm: Annotated[str, Form()],
        weight_kg: Annotated[str, Form()],
        activity_level: Annotated[str, Form()],
        goal: Annotated[str, Form()],
        user_id: Annotated[str | None, Form()] = None,
    ) -> dict[str, object]:
        """Analyze a meal photo for the submitted profile."""
        state_container: AppContainer = request.app.state.container
        profile = validate_profile(
            {
                "user_id": user_id,
                "sex": sex,
                "age": age,
                "height_cm": height_cm,
                "weight_kg": weight_kg,
                "activity_level": activity_level,
                "goal": goal,
            }
        )
        max_image_bytes = state_container.settings.max_image_bytes
        image_bytes = await image.read(max_image_bytes + 1)
        if not image_bytes:
            raise HTTPException(
                status_code=422,
                detail="Image file is empty.",
            )
        if len(image_bytes) > max_image_bytes:
            raise HTTPException(
                status_code=413,
                detail="Image file is too large.",
            )
        result = await state_container.analysis_service.analyze(profile, image_bytes)
        return result.model_dump(mode="json")

    return app


def _profile_to_dict(profile: UserProfile) -> dict[str, object]:
    return {
        "user_id": profile.user_id,
        "sex": profile.sex.value,
        "age": profile.age,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "activity_level": profile.activity_level.value,
        "goal": profile.goal.value,
    }

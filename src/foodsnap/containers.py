"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from foodsnap.adapters.openai_vision_client import OpenAIVisionClient
from foodsnap.config import Settings
from foodsnap.services.analysis import AnalysisService
from foodsnap.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    vision_service: VisionService
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    vision_service = VisionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    analysis_service = AnalysisService(
        detector=vision_service,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await openai_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        vision_service=vision_service,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )

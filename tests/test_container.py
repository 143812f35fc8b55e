"""Tests for container wiring."""

import asyncio

from foodsnap.adapters.openai_vision_client import OpenAIVisionClient
from foodsnap.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.analysis_service.detector is container.vision_service
    assert isinstance(container.vision_service.client, OpenAIVisionClient)
    assert container.vision_service.model == settings.openai_model
    asyncio.run(container.close_resources())

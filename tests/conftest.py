"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from foodsnap.config import Settings
from foodsnap.containers import AppContainer
from foodsnap.domain.errors import DetectionError
from foodsnap.domain.profile import ActivityLevel, Goal, Sex, UserProfile
from foodsnap.domain.vision import DetectionBatch
from foodsnap.services.analysis import AnalysisService
from foodsnap.services.vision import VisionClient, VisionService


def detection_payload(
    detection_id: str = "d1", label: str = "pho_bo", estimated_kcal: float = 450
) -> dict[str, object]:
    return {
        "id": detection_id,
        "bbox": [10, 20, 300, 280],
        "mask_rle": None,
        "label": label,
        "label_display": label.replace("_", " ").title(),
        "confidence": 0.91,
        "top5": [
            {"label": label, "display": label.title(), "confidence": 0.91},
            {"label": "bun_bo", "display": "Bun bo", "confidence": 0.05},
        ],
        "segmentation_area_px": 52000,
        "estimated_grams": 500,
        "grams_confidence": 0.6,
        "kcal_per_100g": 90,
        "estimated_kcal": estimated_kcal,
    }


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "detections": [
                detection_payload("d1", "pho_bo", 500),
                detection_payload("d2", "spring_roll", 300),
            ],
            "image_meta": {
                "width": 1024,
                "height": 768,
                "device": "Unknown",
                "use_reference_card": False,
            },
        }
    )
    calls: list[dict[str, object]] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.calls.append(
            {
                "model": model,
                "reasoning_effort": reasoning_effort,
                "store": store,
                "image_data_url": image_data_url,
                "schema": schema,
                "prompt": prompt,
            }
        )
        return self.payload


@dataclass
class StaticDetector:
    """Detection supplier returning a prepared batch."""

    batch: DetectionBatch = field(
        default_factory=lambda: DetectionBatch(detections=())
    )
    images: list[bytes] = field(default_factory=list)

    async def detect(self, image_bytes: bytes) -> DetectionBatch:
        self.images.append(image_bytes)
        return self.batch


@dataclass
class FailingDetector:
    """Detection supplier that always raises the given error."""

    error: Exception = field(
        default_factory=lambda: DetectionError("vision model unavailable")
    )

    async def detect(self, image_bytes: bytes) -> DetectionBatch:
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", max_image_bytes=1024)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        sex=Sex.MALE,
        age=30,
        height_cm=175,
        weight_kg=70,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.MAINTAIN,
        user_id="user_123",
    )


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def container(settings: Settings, vision_client: FakeVisionClient) -> AppContainer:
    vision_service = VisionService(
        client=vision_client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
    )
    analysis_service = AnalysisService(detector=vision_service, debug=True)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        vision_service=vision_service,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )

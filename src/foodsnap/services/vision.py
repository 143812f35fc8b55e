"""Meal detection service backed by a multimodal LLM."""

import base64
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from foodsnap.domain.errors import DetectionError
from foodsnap.domain.vision import DetectionBatch

_NULLABLE_STRING = {"anyOf": [{"type": "string"}, {"type": "null"}]}
_NULLABLE_INTEGER = {"anyOf": [{"type": "integer", "minimum": 0}, {"type": "null"}]}

DETECTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "detections": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "bbox": {
                        "type": "array",
                        "items": {"type": "integer"},
                        "minItems": 4,
                        "maxItems": 4,
                    },
                    "mask_rle": _NULLABLE_STRING,
                    "label": {"type": "string"},
                    "label_display": {"type": "string"},
                    "confidence": {"type": "number", "minimum": 0.0, "maximum": 1.0},
                    "top5": {
                        "type": "array",
                        "maxItems": 5,
                        "items": {
                            "type": "object",
                            "properties": {
                                "label": {"type": "string"},
                                "display": {"type": "string"},
                                "confidence": {"type": "number"},
                            },
                            "required": ["label", "display", "confidence"],
                            "additionalProperties": False,
                        },
                    },
                    "segmentation_area_px": _NULLABLE_INTEGER,
                    "estimated_grams": {"type": "number", "minimum": 0},
                    "grams_confidence": {
                        "type": "number",
                        "minimum": 0.0,
                        "maximum": 1.0,
                    },
                    "kcal_per_100g": {"type": "number", "minimum": 0},
                    "estimated_kcal": {"type": "number", "minimum": 0},
                },
                "required": [
                    "id",
                    "bbox",
                    "mask_rle",
                    "label",
                    "label_display",
                    "confidence",
                    "top5",
                    "segmentation_area_px",
                    "estimated_grams",
                    "grams_confidence",
                    "kcal_per_100g",
                    "estimated_kcal",
                ],
                "additionalProperties": False,
            },
        },
        "image_meta": {
            "type": "object",
            "properties": {
                "width": _NULLABLE_INTEGER,
                "height": _NULLABLE_INTEGER,
                "device": {"type": "string"},
                "use_reference_card": {"type": "boolean"},
            },
            "required": ["width", "height", "device", "use_reference_card"],
            "additionalProperties": False,
        },
    },
    "required": ["detections", "image_meta"],
    "additionalProperties": False,
}

DETECTION_PROMPT = (
    "Analyze the attached photo of a meal. "
    "Detect each distinct food item and give its bounding box as "
    "[x_min, y_min, x_max, y_max] in pixels, an id such as 'd1', an internal "
    "snake_case label, a display name and a confidence (0-1). "
    "List up to five alternative classifications with confidences. "
    "Estimate the portion in grams realistically with a confidence (0-1), "
    "the typical kcal per 100g, and the estimated kcal for the portion. "
    "Report the image width, height and capturing device if known "
    "(use 'Unknown' otherwise) and whether a reference card is visible."
)


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

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
        """Return structured vision extraction data."""


@dataclass
class VisionService:
    """Detection supplier that prompts a vision model and validates results."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def detect(self, image_bytes: bytes) -> DetectionBatch:
        """Detect food items and their calories in a meal photo."""
        raw = await self.client.extract(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=_to_data_url(image_bytes),
            schema=DETECTION_SCHEMA,
            prompt=DETECTION_PROMPT,
        )
        try:
            return DetectionBatch.model_validate(raw)
        except PydanticValidationError as exc:
            raise DetectionError("Vision model returned malformed detections") from exc


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"

"""Models for detection results returned by the inference provider."""

from pydantic import BaseModel, ConfigDict, Field


class TopPrediction(BaseModel):
    """Alternative classification for a detected item."""

    model_config = ConfigDict(frozen=True)

    label: str
    display: str
    confidence: float


class Detection(BaseModel):
    """Single recognized food item with portion and calorie estimates.

    Values come straight from the inference provider and are only checked
    for presence and type.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    bbox: tuple[int, int, int, int]
    mask_rle: str | None = None
    label: str
    label_display: str
    confidence: float
    top5: tuple[TopPrediction, ...] = ()
    segmentation_area_px: int | None = None
    estimated_grams: float
    grams_confidence: float
    kcal_per_100g: float
    estimated_kcal: float


class ImageMeta(BaseModel):
    """Basic facts about the analysed photo."""

    model_config = ConfigDict(frozen=True)

    width: int | None = None
    height: int | None = None
    device: str = "Unknown"
    use_reference_card: bool = False


class DetectionBatch(BaseModel):
    """Structured output of one detection request."""

    model_config = ConfigDict(frozen=True)

    detections: tuple[Detection, ...]
    image_meta: ImageMeta = Field(default_factory=ImageMeta)

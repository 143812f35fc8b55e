"""Analysis result aggregate."""

from pydantic import BaseModel, ConfigDict, Field

from foodsnap.domain.profile import UserProfile
from foodsnap.domain.suitability import Suitability
from foodsnap.domain.vision import Detection, ImageMeta


class AnalysisMetadata(BaseModel):
    """Request and image identifiers passed through to the result."""

    model_config = ConfigDict(frozen=True)

    request_id: str
    image_id: str
    timestamp: str
    image_meta: ImageMeta = Field(default_factory=ImageMeta)
    corrections_allowed: bool = True


class AnalysisResult(BaseModel):
    """Immutable outcome of one meal analysis."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    request_id: str
    user_id: str
    image_id: str
    image_meta: ImageMeta
    detections: tuple[Detection, ...]
    meal_total_kcal: float
    user_profile_snapshot: UserProfile
    user_tdee: float
    meal_target_kcal: int
    suitability: Suitability
    corrections_allowed: bool

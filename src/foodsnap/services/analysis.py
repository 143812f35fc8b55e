"""Meal analysis assembly and orchestration."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from foodsnap.domain.analysis import AnalysisMetadata, AnalysisResult
from foodsnap.domain.energy import EnergyProfile
from foodsnap.domain.profile import UserProfile
from foodsnap.domain.vision import Detection, DetectionBatch
from foodsnap.services.energy import compute_energy_profile
from foodsnap.services.suitability import classify_suitability

_logger = logging.getLogger(__name__)


class DetectionSupplier(Protocol):
    """Source of food detections for a meal photo."""

    async def detect(self, image_bytes: bytes) -> DetectionBatch:
        """Return detections and image metadata for the photo."""


def assemble_analysis(
    profile: UserProfile,
    energy: EnergyProfile,
    detections: Iterable[Detection],
    metadata: AnalysisMetadata,
) -> AnalysisResult:
    """Combine detections and energy figures into an analysis result.

    An empty detection list yields a zero total and a ``low`` verdict.
    """
    items = tuple(detections)
    meal_total_kcal = sum((item.estimated_kcal for item in items), 0.0)
    suitability = classify_suitability(
        meal_total_kcal, energy.meal_target_kcal, profile.goal
    )
    return AnalysisResult(
        timestamp=metadata.timestamp,
        request_id=metadata.request_id,
        user_id=profile.user_id,
        image_id=metadata.image_id,
        image_meta=metadata.image_meta,
        detections=items,
        meal_total_kcal=meal_total_kcal,
        user_profile_snapshot=profile,
        user_tdee=energy.tdee,
        meal_target_kcal=energy.meal_target_kcal,
        suitability=suitability,
        corrections_allowed=metadata.corrections_allowed,
    )


@dataclass
class AnalysisService:
    """Runs one meal analysis against an injected detection supplier."""

    detector: DetectionSupplier
    debug: bool = False

    async def analyze(self, profile: UserProfile, image_bytes: bytes) -> AnalysisResult:
        """Detect foods in the photo and evaluate them against the profile."""
        energy = compute_energy_profile(profile)
        batch = await self.detector.detect(image_bytes)
        metadata = AnalysisMetadata(
            request_id=str(uuid4()),
            image_id=str(uuid4()),
            timestamp=datetime.now(tz=UTC).isoformat(),
            image_meta=batch.image_meta,
        )
        result = assemble_analysis(profile, energy, batch.detections, metadata)
        if self.debug:
            _logger.info(
                "Meal analysis: request_id=%s items=%s total=%s target=%s status=%s",
                result.request_id,
                len(result.detections),
                result.meal_total_kcal,
                result.meal_target_kcal,
                result.suitability.status.value,
            )
        return result

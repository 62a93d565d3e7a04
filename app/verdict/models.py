"""
Verdict Models

Pydantic models for the assessment verdict.

Verdicts carry no timestamps or random ids: equal answers give equal verdicts.

Version: verdict_engine_v1
"""

from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.rules.models import CapabilityTier, LightLevel

ENGINE_VERSION = "verdict_engine_v1"


@dataclass(frozen=True)
class SiteFlags:
    """Cross-question conditions derived from the tag set."""
    has_drums: bool
    neighbors_very_close: bool
    late_use: bool
    shared_building: bool


class VerdictMeta(BaseModel):
    """Audit bundle behind a verdict."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    points: int
    hard_stop_triggered: bool = Field(
        description="Final hard stop: explicit option flag OR dynamic rule"
    )
    explicit_hard_stop: bool = Field(
        description="A selected option carries the hard-stop flag"
    )
    dynamic_hard_stop: bool = Field(
        description="Cross-question hard stop (shared building, drums on a weak floor)"
    )
    capability_tier: CapabilityTier
    tier_label: str
    tags: List[str] = Field(
        default_factory=list,
        description="Triggered tags in first-seen rule-table order"
    )
    answers_hash: str
    engine_version: str = ENGINE_VERSION


class Verdict(BaseModel):
    """
    Complete output of the verdict engine.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    light: LightLevel
    title: str
    summary: str
    bullets: List[str]
    cta_primary: str
    meta: VerdictMeta

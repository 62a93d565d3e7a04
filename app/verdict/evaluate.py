"""
Verdict Engine

Turns an answer set into a traffic-light verdict.

Decision is two layers, each testable on its own:
1. light_for_points: tier-specific point thresholds (a total order of severity)
2. apply_hard_stop: explicit or dynamic hard stop forces RED

PRINCIPLE: a hard stop is never negotiated down by a low point total.

Version: verdict_engine_v1
"""

import logging
from typing import Iterable, Optional

from app.rules.answers import Answers
from app.rules.models import CapabilityTier, LightLevel, Tag
from app.rules.questions import TIER_THRESHOLDS
from app.scoring.aggregate import aggregate
from app.scoring.tier import classify_tier
from app.shared.hashing import hash_answers

from .copy import LIGHT_COPY, build_bullets, common_notes
from .models import SiteFlags, Verdict, VerdictMeta

logger = logging.getLogger(__name__)


def derive_flags(tags: Iterable[Tag]) -> SiteFlags:
    tag_set = set(tags)
    return SiteFlags(
        has_drums=Tag.SRC_DRUMS in tag_set,
        neighbors_very_close=Tag.NEIGHBORS_VERY_CLOSE in tag_set,
        late_use=Tag.TIME_LATE in tag_set or Tag.TIME_OVERNIGHT in tag_set,
        shared_building=Tag.SHARED_BUILDING in tag_set or Tag.ABOVE_OTHER_UNIT in tag_set,
    )


def is_dynamic_hard_stop(flags: SiteFlags, tier: CapabilityTier) -> bool:
    """
    Hard stop that no single option carries.

    - Shared building or a dwelling unit above: always
    - Drums on a slab (tier A): never
    - Drums on wood over crawlspace (tier B): very close neighbors AND late use
    - Drums on wood over living space (tier C): very close neighbors OR late use
    """
    if flags.shared_building:
        return True
    if not flags.has_drums:
        return False
    if tier == CapabilityTier.B:
        return flags.neighbors_very_close and flags.late_use
    if tier == CapabilityTier.C:
        return flags.neighbors_very_close or flags.late_use
    return False


def light_for_points(tier: CapabilityTier, points: int) -> LightLevel:
    """First band whose ceiling holds the total; RED above every band."""
    for max_points, light in TIER_THRESHOLDS[tier]:
        if points <= max_points:
            return light
    return LightLevel.RED


def apply_hard_stop(light: LightLevel, hard_stop: bool) -> LightLevel:
    if hard_stop:
        return LightLevel.RED
    return light


def evaluate(answers: Answers, answers_hash: Optional[str] = None) -> Verdict:
    """
    Evaluate a (possibly partial) answer set.

    Missing answers weigh zero: no points, no tags, no hard stop.

    Args:
        answers: question id -> option id / list of option ids / None
        answers_hash: precomputed canonical hash, computed here if omitted

    Returns:
        Verdict with light, copy and audit metadata
    """
    agg = aggregate(answers)
    tier = classify_tier(agg.tags)
    flags = derive_flags(agg.tags)

    dynamic_hard_stop = is_dynamic_hard_stop(flags, tier)
    hard_stop = agg.hard_stop_triggered or dynamic_hard_stop

    light = apply_hard_stop(light_for_points(tier, agg.points), hard_stop)

    copy = LIGHT_COPY[light]
    bullets = build_bullets(light, common_notes(tier, flags, agg.tags))

    logger.info(
        f"Assessment verdict: light={light.value} tier={tier.value} points={agg.points} "
        f"explicit_hard_stop={agg.hard_stop_triggered} dynamic_hard_stop={dynamic_hard_stop}"
    )

    return Verdict(
        light=light,
        title=copy.title,
        summary=copy.summary,
        bullets=bullets,
        cta_primary=copy.cta_primary,
        meta=VerdictMeta(
            points=agg.points,
            hard_stop_triggered=hard_stop,
            explicit_hard_stop=agg.hard_stop_triggered,
            dynamic_hard_stop=dynamic_hard_stop,
            capability_tier=tier,
            tier_label=tier.label,
            tags=agg.tag_values(),
            answers_hash=answers_hash or hash_answers(answers),
        ),
    )

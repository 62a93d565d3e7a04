"""
Capability Tier Classifier

Floor construction alone gates the tier. First match wins:
    floor_slab  -> A
    floor_crawl -> B
    otherwise   -> C
"""

from typing import Iterable

from app.rules.models import CapabilityTier, Tag


def classify_tier(tags: Iterable[Tag]) -> CapabilityTier:
    tag_set = set(tags)
    if Tag.FLOOR_SLAB in tag_set:
        return CapabilityTier.A
    if Tag.FLOOR_CRAWL in tag_set:
        return CapabilityTier.B
    return CapabilityTier.C

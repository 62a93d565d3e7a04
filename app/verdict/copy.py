"""
Verdict Copy
============
Templated explanatory text for each light level.

Rules:
- Every sentence is selected by a boolean predicate over the tag set
- NO free-form generation
- Bullet order is fixed per light level
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from app.rules.models import CapabilityTier, LightLevel, Tag

from .models import SiteFlags

CTA_PRIMARY = "Book a Soundproof Planning Call"


FLOOR_NOTES: Dict[CapabilityTier, str] = {
    CapabilityTier.A: (
        "A concrete slab is a strong foundation for high isolation when the full system is designed together."
    ),
    CapabilityTier.B: (
        "A wood floor over crawlspace limits low-frequency isolation. Projects can still succeed when "
        "isolation is not the primary goal and expectations are controlled."
    ),
    CapabilityTier.C: (
        "A wood floor over living space places a hard ceiling on achievable isolation—especially for "
        "low-frequency energy like drums and bass."
    ),
}

SOURCES_NOTE_DRUMS = (
    "Drums and band-level sound are low-frequency dominant. These projects succeed only when structure, "
    "isolation, airtightness, and ventilation are coordinated as one system."
)
SOURCES_NOTE_LIGHT = (
    "Lighter use cases (voice, editing, moderate instruments) are more forgiving—but still benefit from "
    "a coordinated plan."
)

STAKES_NOTE_HIGH = "Close neighbors and/or late-night use significantly raise the bar for success."
STAKES_NOTE_DEFAULT = (
    "Your disturbance context sets the isolation target—and the construction complexity required."
)

EXPECTATION_NOTE_STRICT = (
    "Your success target appears very strict. Most failures come from an expectation mismatch rather "
    "than “bad materials.”"
)
EXPECTATION_NOTE_CALIBRATED = "Your success target appears reasonably calibrated for a professional plan."

BUDGET_NOTE_LOW = (
    "Budget appears to be a limiting factor. If isolation is the goal, scope and expectations must be "
    "adjusted to avoid disappointment."
)
BUDGET_NOTE_OK = "Budget appears broadly compatible with a planned approach."

GREEN_SLAB_NOTE = (
    "Most Green results occur on a concrete slab foundation. Slabs dramatically improve predictability "
    "for isolation—especially for low-frequency energy."
)


@dataclass(frozen=True)
class LightCopy:
    title: str
    summary: str
    closing: str
    cta_primary: str = CTA_PRIMARY


LIGHT_COPY: Dict[LightLevel, LightCopy] = {
    LightLevel.GREEN: LightCopy(
        title="Green Light — Viable to Proceed",
        summary=(
            "Your site supports a reliable soundproof studio outcome, assuming isolation and ventilation "
            "are designed together before construction."
        ),
        closing=(
            "Next step: define the isolation strategy + ventilation pathing before any irreversible "
            "framing or electrical decisions."
        ),
    ),
    LightLevel.YELLOW: LightCopy(
        title="Yellow Light — Elevated Risk",
        summary=(
            "Soundproofing may be possible, but your site includes risk factors that typically increase "
            "cost, complexity, or required compromise."
        ),
        closing=(
            "Next step: get a professional plan to avoid expensive rework (most failures happen from "
            "order-of-operations mistakes)."
        ),
    ),
    LightLevel.RED: LightCopy(
        title="Red Light — Not Advisable",
        summary=(
            "This site has constraints that make reliable soundproofing unlikely or disproportionately "
            "expensive relative to the outcome—especially for your stated use case."
        ),
        closing=(
            "Best move: reconsider location or dramatically adjust expectations before you spend money "
            "on construction."
        ),
    ),
}


def common_notes(
    tier: CapabilityTier,
    flags: SiteFlags,
    tags: Tuple[Tag, ...],
) -> List[str]:
    """Floor, sources, stakes, expectation and budget notes, in that order."""
    tag_set = set(tags)
    return [
        FLOOR_NOTES[tier],
        SOURCES_NOTE_DRUMS if flags.has_drums else SOURCES_NOTE_LIGHT,
        STAKES_NOTE_HIGH if (flags.neighbors_very_close or flags.late_use) else STAKES_NOTE_DEFAULT,
        EXPECTATION_NOTE_STRICT if Tag.EXP_UNREALISTIC in tag_set else EXPECTATION_NOTE_CALIBRATED,
        BUDGET_NOTE_LOW if Tag.BUDGET_LOW in tag_set else BUDGET_NOTE_OK,
    ]


def build_bullets(light: LightLevel, notes: List[str]) -> List[str]:
    """
    Order the notes for a light level.

    GREEN puts the slab affirmation right after the floor note.
    """
    closing = LIGHT_COPY[light].closing
    if light == LightLevel.GREEN:
        return [notes[0], GREEN_SLAB_NOTE, *notes[1:], closing]
    return [*notes, closing]

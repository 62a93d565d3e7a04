"""
Rule Table Models

Value-typed records for the site assessment questionnaire.

Every option behaves identically: the data decides, not the type.
Records are frozen so the table cannot drift after import.

Version: rule_table_v1
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


# Sentinel point cost carried by hard-stop options. Large enough that a plain
# threshold comparison lands on RED even if the hard-stop flag is ignored.
HARD_STOP_POINTS = 999


class Tag(str, Enum):
    """
    Closed set of correlation tokens attached to options.

    Values are the wire strings so serialized tag lists stay readable.
    """
    # Location
    DETACHED = "detached"
    ATTACHED = "attached"
    INSIDE_HOUSE = "inside_house"
    SHARED_BUILDING = "shared_building"
    # Floor
    FLOOR_SLAB = "floor_slab"
    FLOOR_WOOD = "floor_wood"
    FLOOR_CRAWL = "floor_crawl"
    FLOOR_LIVING_BELOW = "floor_living_below"
    # Ceiling height
    HEIGHT_GREEN = "height_green"
    HEIGHT_YELLOW = "height_yellow"
    HEIGHT_TOO_LOW = "height_too_low"
    # Above the space
    ABOVE_ATTIC = "above_attic"
    ABOVE_LIVING = "above_living"
    ABOVE_OTHER_UNIT = "above_other_unit"
    # Neighbors
    NEIGHBORS_NONE = "neighbors_none"
    NEIGHBORS_FAMILY = "neighbors_family"
    NEIGHBORS_NEAR = "neighbors_near"
    NEIGHBORS_VERY_CLOSE = "neighbors_very_close"
    # Sources
    SRC_VOICE = "src_voice"
    SRC_ACOUSTIC = "src_acoustic"
    SRC_AMPS = "src_amps"
    SRC_DRUMS = "src_drums"
    # Time of use
    TIME_DAY = "time_day"
    TIME_EVENING = "time_evening"
    TIME_LATE = "time_late"
    TIME_OVERNIGHT = "time_overnight"
    # Expectation
    EXP_REASONABLE = "exp_reasonable"
    EXP_SOME_COMPROMISE = "exp_some_compromise"
    EXP_UNREALISTIC = "exp_unrealistic"
    # Structural modifications
    MODS_OK = "mods_ok"
    MODS_LIMITED = "mods_limited"
    MODS_NONE = "mods_none"
    # Ventilation
    VENT_OK = "vent_ok"
    VENT_LIMITED = "vent_limited"
    VENT_NONE = "vent_none"
    # Budget
    BUDGET_LOW = "budget_low"
    BUDGET_MEDIUMLOW = "budget_mediumlow"
    BUDGET_MEDIUM = "budget_medium"
    BUDGET_HIGH = "budget_high"
    # Mindset
    MINDSET_FLEXIBLE = "mindset_flexible"
    MINDSET_RISKY = "mindset_risky"


class Impact(IntEnum):
    """Ordinal impact of a single answer, 0 = supportive, 4 = blocker."""
    SUPPORTIVE = 0
    MINOR = 1
    CONSTRAINT = 2
    MAJOR = 3
    BLOCKER = 4


class LightLevel(str, Enum):
    """Traffic-light outcome of an assessment."""
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"

    @property
    def severity(self) -> int:
        return _LIGHT_SEVERITY[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


_LIGHT_SEVERITY = {
    LightLevel.GREEN: 0,
    LightLevel.YELLOW: 1,
    LightLevel.RED: 2,
}


class CapabilityTier(str, Enum):
    """
    Structural capability of the site, gated by floor construction alone.
    """
    A = "A"  # concrete slab
    B = "B"  # wood over crawlspace
    C = "C"  # wood over living space, or unknown

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS = {
    CapabilityTier.A: "High isolation possible (slab)",
    CapabilityTier.B: "Medium isolation only (wood over crawlspace)",
    CapabilityTier.C: "Light isolation only (wood over living space)",
}


@dataclass(frozen=True)
class Option:
    """A selectable answer to a question."""
    id: str
    label: str
    points: int
    impact: int
    interpretation: str
    hard_stop: bool = False
    tags: Tuple[Tag, ...] = ()


@dataclass(frozen=True)
class Question:
    """A single questionnaire step."""
    id: str
    section: str
    title: str
    options: Tuple[Option, ...]
    help: Optional[str] = None
    required: bool = True
    multiple: bool = False

    def option(self, option_id: str) -> Optional[Option]:
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "section": self.section,
            "title": self.title,
            "help": self.help,
            "required": self.required,
            "multiple": self.multiple,
            "options": [
                {
                    "id": opt.id,
                    "label": opt.label,
                    "points": opt.points,
                    "impact": int(opt.impact),
                    "interpretation": opt.interpretation,
                    "hard_stop": opt.hard_stop,
                    "tags": [t.value for t in opt.tags],
                }
                for opt in self.options
            ],
        }

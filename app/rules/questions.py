"""
Soundproof Studio Site Assessment: Rule Table v1
=================================================
Questions, options and point thresholds for the site viability check.

This module is DATA. Deployers may edit text, point values and thresholds
here without touching the evaluation algorithm.

Schema per option:
    points          - added to the site total (999 = effective hard stop)
    impact          - 0 supportive .. 4 blocker
    interpretation  - professional reading of the answer
    hard_stop       - forces RED regardless of points
    tags            - correlation tokens used by cross-question rules

Rule Table Version: 1.0.0
"""

from typing import Dict, Optional, Tuple

from .models import (
    HARD_STOP_POINTS,
    CapabilityTier,
    LightLevel,
    Option,
    Question,
    Tag,
)

RULE_TABLE_VERSION = "1.0.0"


def get_rule_table_version() -> str:
    return RULE_TABLE_VERSION


QUESTIONS: Tuple[Question, ...] = (

    # =========================================================================
    # PROJECT CONTEXT
    # =========================================================================

    Question(
        id="context_location",
        section="Project context",
        title="Where is the studio located?",
        help="This determines how much isolation is realistically achievable and how much risk you carry.",
        options=(
            Option(
                id="detached",
                label="Detached structure (separate building)",
                points=0,
                impact=0,
                interpretation=(
                    "Best-case context. Detached buildings reduce flanking paths into living spaces "
                    "and make high isolation more achievable."
                ),
                tags=(Tag.DETACHED,),
            ),
            Option(
                id="attached",
                label="Attached to a house (garage conversion / addition)",
                points=1,
                impact=1,
                interpretation=(
                    "Very workable, but the connection to the house creates extra flanking paths. "
                    "Planning details matter more than in a detached build."
                ),
                tags=(Tag.ATTACHED,),
            ),
            Option(
                id="inside_house",
                label="Inside a house (basement / spare room)",
                points=2,
                impact=2,
                interpretation=(
                    "More complex than a garage. Existing structure + shared pathways (stairs, framing, "
                    "ductwork) raise the bar, but good results are still possible with realistic goals."
                ),
                tags=(Tag.INSIDE_HOUSE,),
            ),
            Option(
                id="shared_building",
                label="Apartment / condo / shared building",
                points=HARD_STOP_POINTS,
                impact=4,
                hard_stop=True,
                interpretation=(
                    "Shared buildings add legal/HOA limits and extreme flanking paths. Reliable studio "
                    "isolation is rarely practical without major structural work you likely can’t do."
                ),
                tags=(Tag.SHARED_BUILDING,),
            ),
        ),
    ),

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    Question(
        id="floor_type",
        section="Structure",
        title="What is the primary floor construction?",
        help=(
            "High-isolation studios are most reliable on a concrete slab. Wood floors can work for "
            "lighter use cases, but they cap what’s achievable—especially for drums and bass."
        ),
        options=(
            Option(
                id="slab",
                label="Concrete slab",
                points=0,
                impact=0,
                interpretation=(
                    "Strong foundation for serious isolation. Slabs reduce low-frequency vibration "
                    "transmission and make high-performance outcomes more predictable."
                ),
                tags=(Tag.FLOOR_SLAB,),
            ),
            Option(
                id="wood_crawl",
                label="Wood floor over crawlspace",
                points=2,
                impact=2,
                interpretation=(
                    "This floor type places a hard ceiling on achievable sound isolation, especially for "
                    "low-frequency energy. Projects can still succeed when sound isolation is not the "
                    "primary goal, expectations are clearly defined, and use cases are controlled. If high "
                    "isolation is the objective, a slab-on-grade foundation is strongly preferred."
                ),
                tags=(Tag.FLOOR_WOOD, Tag.FLOOR_CRAWL),
            ),
            Option(
                id="wood_living",
                label="Wood floor over living space",
                points=4,
                impact=3,
                interpretation=(
                    "This structure is fundamentally limited for sound isolation. Voice and low-impact use "
                    "cases can work well, but projects aimed at containing amplified or percussive sound "
                    "typically involve significant compromise or disproportionate cost."
                ),
                tags=(Tag.FLOOR_WOOD, Tag.FLOOR_LIVING_BELOW),
            ),
        ),
    ),

    Question(
        id="ceiling_height",
        section="Structure",
        title="What is the existing ceiling height (before any soundproofing)?",
        help=(
            "Soundproofing consumes height. If you start too low, you can end up with an unusable room "
            "after isolation + ducting + finishes."
        ),
        options=(
            Option(
                id="h_9plus",
                label="9 ft or higher",
                points=0,
                impact=0,
                interpretation=(
                    "Excellent starting height. You have room for isolation details, lighting, and "
                    "ventilation routing without the room feeling cramped."
                ),
                tags=(Tag.HEIGHT_GREEN,),
            ),
            Option(
                id="h_8_9",
                label="8–9 ft",
                points=0,
                impact=0,
                interpretation=(
                    "Solid starting height. Most garage/basement studios can succeed here with a "
                    "coordinated plan."
                ),
                tags=(Tag.HEIGHT_GREEN,),
            ),
            Option(
                id="h_7_8",
                label="7–8 ft",
                points=2,
                impact=2,
                interpretation=(
                    "Constraint territory. Still possible, but finished height can get tight and "
                    "ventilation becomes more difficult. This often pushes projects toward smarter "
                    "compromises."
                ),
                tags=(Tag.HEIGHT_YELLOW,),
            ),
            Option(
                id="h_under7",
                label="Under 7 ft",
                points=HARD_STOP_POINTS,
                impact=4,
                hard_stop=True,
                interpretation=(
                    "Fundamental constraint. After isolation + ventilation, the room often becomes "
                    "impractical. Most projects in this range should reassess the site or scope."
                ),
                tags=(Tag.HEIGHT_TOO_LOW,),
            ),
        ),
    ),

    Question(
        id="above_space",
        section="Structure",
        title="What is above the space?",
        options=(
            Option(
                id="attic",
                label="Attic / roof only",
                points=0,
                impact=0,
                interpretation=(
                    "Best-case condition. No occupied space above reduces the isolation target and "
                    "lowers risk of flanking."
                ),
                tags=(Tag.ABOVE_ATTIC,),
            ),
            Option(
                id="living",
                label="Living space (bedroom, office, etc.)",
                points=2,
                impact=2,
                interpretation=(
                    "Higher stakes. Impact noise and flanking become more likely, and your ceiling "
                    "assembly has to do more work."
                ),
                tags=(Tag.ABOVE_LIVING,),
            ),
            Option(
                id="other_unit",
                label="Another dwelling unit",
                points=HARD_STOP_POINTS,
                impact=4,
                hard_stop=True,
                interpretation=(
                    "Fundamental risk. Separate dwelling units add strict noise expectations and extreme "
                    "flanking paths—reliable results are rarely practical."
                ),
                tags=(Tag.ABOVE_OTHER_UNIT,),
            ),
        ),
    ),

    # =========================================================================
    # NOISE STAKES
    # =========================================================================

    Question(
        id="neighbors",
        section="Noise stakes",
        title="Who are you trying not to disturb?",
        options=(
            Option(
                id="no_one",
                label="No one (rural / isolated)",
                points=0,
                impact=0,
                interpretation=(
                    "Lowest stakes. You may be able to meet your goals with less extreme construction."
                ),
                tags=(Tag.NEIGHBORS_NONE,),
            ),
            Option(
                id="family",
                label="Family in the same house",
                points=1,
                impact=1,
                interpretation=(
                    "Common scenario. You’ll want good isolation, but expectations can be calibrated "
                    "(especially by time-of-day and use case)."
                ),
                tags=(Tag.NEIGHBORS_FAMILY,),
            ),
            Option(
                id="20_50",
                label="Neighbors about 20–50 ft away",
                points=1,
                impact=1,
                interpretation=(
                    "Manageable with a proper system. Close enough that doors, ventilation, and "
                    "airtightness matter."
                ),
                tags=(Tag.NEIGHBORS_NEAR,),
            ),
            Option(
                id="lt20",
                label="Neighbors closer than 20 ft / shared walls nearby",
                points=3,
                impact=3,
                interpretation=(
                    "High stakes. This raises the isolation target substantially and makes "
                    "order-of-operations mistakes very expensive."
                ),
                tags=(Tag.NEIGHBORS_VERY_CLOSE,),
            ),
        ),
    ),

    # =========================================================================
    # USE CASE
    # =========================================================================

    Question(
        id="use_cases",
        section="Use case",
        title="What are you trying to contain?",
        help=(
            "Select all that apply. Low-frequency sources (drums, bass-heavy amps) dramatically raise "
            "the isolation bar."
        ),
        multiple=True,
        options=(
            Option(
                id="voice",
                label="Voice / podcast / streaming",
                points=0,
                impact=0,
                interpretation=(
                    "Most forgiving use case. Excellent fit for garages and basements with reasonable "
                    "expectations."
                ),
                tags=(Tag.SRC_VOICE,),
            ),
            Option(
                id="acoustic",
                label="Acoustic instruments",
                points=1,
                impact=1,
                interpretation=(
                    "Still very achievable in many sites. Requires attention to airtightness and "
                    "ventilation noise."
                ),
                tags=(Tag.SRC_ACOUSTIC,),
            ),
            Option(
                id="amps",
                label="Amplified instruments at moderate volume",
                points=2,
                impact=2,
                interpretation=(
                    "Achievable, but the isolation target rises. Door performance and ventilation design "
                    "become major determinants of success."
                ),
                tags=(Tag.SRC_AMPS,),
            ),
            Option(
                id="drums",
                label="Drum kit / band rehearsal / performance volume",
                points=5,
                impact=3,
                interpretation=(
                    "Highest-impact source. Best matched to slab-on-grade builds. On wood floors, results "
                    "are possible only in limited scenarios and often require compromises."
                ),
                tags=(Tag.SRC_DRUMS,),
            ),
        ),
    ),

    Question(
        id="time_of_use",
        section="Use case",
        title="When will you primarily use the studio?",
        options=(
            Option(
                id="day",
                label="Daytime only",
                points=0,
                impact=0,
                interpretation=(
                    "Best-case scheduling. Lower isolation target and fewer conflicts with "
                    "family/neighbors."
                ),
                tags=(Tag.TIME_DAY,),
            ),
            Option(
                id="evening",
                label="Evenings",
                points=1,
                impact=1,
                interpretation=(
                    "Common and workable. Raises the target slightly depending on neighbors and use case."
                ),
                tags=(Tag.TIME_EVENING,),
            ),
            Option(
                id="late",
                label="Late night (after ~10pm)",
                points=2,
                impact=2,
                interpretation=(
                    "Higher stakes. Quiet hours raise expectations, so the room needs more isolation "
                    "(and quieter ventilation)."
                ),
                tags=(Tag.TIME_LATE,),
            ),
            Option(
                id="overnight",
                label="Any time, including overnight",
                points=3,
                impact=3,
                interpretation=(
                    "Very high stakes. This significantly increases the bar for success in attached homes "
                    "and close-neighbor situations."
                ),
                tags=(Tag.TIME_OVERNIGHT,),
            ),
        ),
    ),

    # =========================================================================
    # EXPECTATIONS
    # =========================================================================

    Question(
        id="expectation",
        section="Expectations",
        title="What does “success” look like to you?",
        help=(
            "Soundproofing is about managing transmission. “Complete silence” is rarely "
            "realistic in shared structures or high-stakes scenarios."
        ),
        options=(
            Option(
                id="not_notice",
                label="No one notices normal use",
                points=0,
                impact=0,
                interpretation=(
                    "Strong, realistic target for many garage/basement studios when designed as a system."
                ),
                tags=(Tag.EXP_REASONABLE,),
            ),
            Option(
                id="faint",
                label="Loud sessions are faintly audible",
                points=1,
                impact=1,
                interpretation=(
                    "Practical expectation. This framing often leads to better cost/performance decisions."
                ),
                tags=(Tag.EXP_REASONABLE,),
            ),
            Option(
                id="restricted",
                label="Occasional loud sessions at restricted times",
                points=2,
                impact=2,
                interpretation=(
                    "Good compromise mindset. Scheduling + smart design choices can outperform "
                    "“more materials.”"
                ),
                tags=(Tag.EXP_SOME_COMPROMISE,),
            ),
            Option(
                id="silence",
                label="Complete silence outside the room",
                points=4,
                impact=3,
                interpretation=(
                    "Very strict target. Often requires extreme construction or leads to disappointment "
                    "unless the site is ideal (detached + slab + robust ventilation)."
                ),
                tags=(Tag.EXP_UNREALISTIC,),
            ),
        ),
    ),

    # =========================================================================
    # CONSTRAINTS
    # =========================================================================

    Question(
        id="mods",
        section="Constraints",
        title="Are you willing to permanently modify the structure?",
        help="High-performing isolation requires real construction changes.",
        options=(
            Option(
                id="yes",
                label="Yes, structural changes are acceptable",
                points=0,
                impact=0,
                interpretation=(
                    "Great. True isolation requires structural decisions (framing, decoupling, "
                    "airtightness, doors/windows, ventilation)."
                ),
                tags=(Tag.MODS_OK,),
            ),
            Option(
                id="minor",
                label="Minor changes only",
                points=2,
                impact=2,
                interpretation=(
                    "Constraint. Limited modifications often cap achievable isolation and increase the "
                    "chance of weak links (especially doors/ventilation)."
                ),
                tags=(Tag.MODS_LIMITED,),
            ),
            Option(
                id="no",
                label="No permanent modifications",
                points=HARD_STOP_POINTS,
                impact=4,
                hard_stop=True,
                interpretation=(
                    "Fundamental blocker for serious soundproofing. Without permanent construction "
                    "changes, reliable isolation outcomes are unlikely."
                ),
                tags=(Tag.MODS_NONE,),
            ),
        ),
    ),

    Question(
        id="ventilation",
        section="Ventilation",
        title="Can ventilation equipment be added or modified?",
        help="A sealed room without a quiet ventilation strategy is a common studio failure point.",
        options=(
            Option(
                id="vent_yes",
                label="Yes, fully flexible",
                points=0,
                impact=0,
                interpretation=(
                    "Excellent. Quiet ventilation is a pillar of a successful studio—this "
                    "flexibility makes the whole system more viable."
                ),
                tags=(Tag.VENT_OK,),
            ),
            Option(
                id="vent_limited",
                label="Limited options",
                points=2,
                impact=2,
                interpretation=(
                    "Constraint. You can still succeed, but ventilation often becomes the limiting factor "
                    "(noise, airflow, routing)."
                ),
                tags=(Tag.VENT_LIMITED,),
            ),
            Option(
                id="vent_no",
                label="No changes allowed",
                points=HARD_STOP_POINTS,
                impact=4,
                hard_stop=True,
                interpretation=(
                    "Fundamental blocker. A sealed studio without ventilation changes tends to fail "
                    "(comfort, CO₂, and noise control)."
                ),
                tags=(Tag.VENT_NONE,),
            ),
        ),
    ),

    # =========================================================================
    # BUDGET REALITY
    # =========================================================================

    Question(
        id="budget",
        section="Budget reality",
        title="What build budget range are you mentally prepared for (design + build)?",
        help="This helps calibrate what outcomes are realistic based on your site and use case.",
        options=(
            Option(
                id="b_lt10",
                label="Under $10k",
                points=4,
                impact=3,
                interpretation=(
                    "Impractical budget for meaningful sound isolation. Any reasonable sound isolation "
                    "should not be expected at this level."
                ),
                tags=(Tag.BUDGET_LOW,),
            ),
            Option(
                id="b_10_25",
                label="$10k–$25k",
                points=2,
                impact=2,
                interpretation=(
                    "Light sound isolation may be possible only if the space is small (typically under "
                    "~200 sq ft) and a significant portion of the labor is DIY."
                ),
                tags=(Tag.BUDGET_MEDIUMLOW,),
            ),
            Option(
                id="b_25_50",
                label="$25k–$50k",
                points=1,
                impact=1,
                interpretation=(
                    "Viable for many residential studios when goals are clearly defined and the system is "
                    "planned up front."
                ),
                tags=(Tag.BUDGET_MEDIUM,),
            ),
            Option(
                id="b_50plus",
                label="$50k+",
                points=0,
                impact=0,
                interpretation=(
                    "Best flexibility. This range supports a coordinated isolation and ventilation system "
                    "with fewer compromises."
                ),
                tags=(Tag.BUDGET_HIGH,),
            ),
        ),
    ),

    # =========================================================================
    # DECISION POSTURE
    # =========================================================================

    Question(
        id="mindset",
        section="Decision posture",
        title="If your assessment result is Yellow or Red, what would you do?",
        options=(
            Option(
                id="reconsider",
                label="Reconsider the location",
                points=0,
                impact=0,
                interpretation=(
                    "Strong decision posture. Site selection is often the cheapest "
                    "“soundproofing upgrade” you can make."
                ),
                tags=(Tag.MINDSET_FLEXIBLE,),
            ),
            Option(
                id="adjust",
                label="Adjust expectations / scope",
                points=1,
                impact=1,
                interpretation=(
                    "Healthy flexibility. Success often comes from aligning goals with what the site can "
                    "reliably support."
                ),
                tags=(Tag.MINDSET_FLEXIBLE,),
            ),
            Option(
                id="try_anyway",
                label="Try anyway",
                points=3,
                impact=3,
                interpretation=(
                    "Risky posture. This usually leads to overspending or disappointment unless "
                    "constraints are clearly understood and accepted."
                ),
                tags=(Tag.MINDSET_RISKY,),
            ),
        ),
    ),
)


# =============================================================================
# POINT THRESHOLDS
# Ordered (max_points, light) bands per tier. A total above every band is RED.
# The same total is judged more harshly on a weaker floor.
# =============================================================================

TIER_THRESHOLDS: Dict[CapabilityTier, Tuple[Tuple[int, LightLevel], ...]] = {
    CapabilityTier.A: (
        (7, LightLevel.GREEN),
        (14, LightLevel.YELLOW),
    ),
    CapabilityTier.B: (
        (12, LightLevel.YELLOW),
    ),
    CapabilityTier.C: (
        (10, LightLevel.YELLOW),
    ),
}


_QUESTION_INDEX: Dict[str, Question] = {q.id: q for q in QUESTIONS}


def get_question(question_id: str) -> Optional[Question]:
    return _QUESTION_INDEX.get(question_id)

"""
Assessment Disclaimer Copy
Fixed text shown alongside every verdict.

RULES (LOCKED):
1. The verdict is directional, never a quote or a guarantee.
2. The same copy is returned for every light level.
"""

from typing import Dict

DISCLAIMER_VERSION = "disclaimer_v1.0"

ASSESSMENT_SCOPE = (
    "A professional viability check based on common failure points in real soundproof studio projects."
)

NOT_A_QUOTE = "Not a quote, a guarantee, or a set of instructions."

DIRECTIONAL_NOTICE = (
    "This assessment is directional. Soundproofing success depends on a coordinated system: isolation, "
    "structure, airtightness, doors/windows, and a quiet ventilation strategy."
)


def get_disclaimer() -> Dict[str, str]:
    """
    Return the locked disclaimer block.

    Example:
        >>> get_disclaimer()["version"]
        'disclaimer_v1.0'
    """
    return {
        "scope": ASSESSMENT_SCOPE,
        "not_a_quote": NOT_A_QUOTE,
        "directional": DIRECTIONAL_NOTICE,
        "version": DISCLAIMER_VERSION,
    }

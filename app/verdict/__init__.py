"""
Verdict Engine Module

Combines tags, capability tier, points and hard stops into a
GREEN / YELLOW / RED verdict with templated explanation.

Design Principles:
- PURE: no I/O, no state, no randomness
- TWO-LAYER: point severity first, hard-stop override second
- TEMPLATED: every sentence comes from a fixed predicate over tags

Version: verdict_engine_v1
"""

from .models import ENGINE_VERSION, SiteFlags, Verdict, VerdictMeta
from .evaluate import (
    apply_hard_stop,
    derive_flags,
    evaluate,
    is_dynamic_hard_stop,
    light_for_points,
)
from .copy import CTA_PRIMARY, LIGHT_COPY

__all__ = [
    # Models
    "ENGINE_VERSION",
    "SiteFlags",
    "Verdict",
    "VerdictMeta",
    # Functions
    "apply_hard_stop",
    "derive_flags",
    "evaluate",
    "is_dynamic_hard_stop",
    "light_for_points",
    # Copy
    "CTA_PRIMARY",
    "LIGHT_COPY",
]

__version__ = ENGINE_VERSION

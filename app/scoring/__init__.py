"""
Scoring Module

Tag collection, point accumulation and capability-tier derivation.

Version: scoring_v1
"""

from .models import Aggregate, Selection
from .aggregate import aggregate, resolve_selections
from .tier import classify_tier

__all__ = [
    "Aggregate",
    "Selection",
    "aggregate",
    "resolve_selections",
    "classify_tier",
]

__version__ = "scoring_v1"

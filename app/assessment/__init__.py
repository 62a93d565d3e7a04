"""
Site Assessment HTTP Module

Thin stateless API over the verdict engine.
"""

from .admin import router as assessment_router

__all__ = [
    "assessment_router",
]

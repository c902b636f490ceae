"""Shared constants."""
from shared.constants import (
    GZD_MISSING,
    GZD_OVERLAYS,
    LATITUDE_BANDS,
    POLAR_REGIONS,
)

__all__ = [
    'GZD_MISSING',
    'GZD_OVERLAYS',
    'LATITUDE_BANDS',
    'POLAR_REGIONS',
]

"""Geo module - UTM/MGRS grid zone designators."""

from .gzd import (
    get_all_gzd,
    get_gzd,
    gzd_bounds,
    parse_gzd_name,
    polar_region_bounds,
    validate_gzd,
)
from .lookup import determine_gzd, find_gzd

__all__ = [
    'determine_gzd',
    'find_gzd',
    'get_all_gzd',
    'get_gzd',
    'gzd_bounds',
    'parse_gzd_name',
    'polar_region_bounds',
    'validate_gzd',
]

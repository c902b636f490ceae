"""Domain layer - zone models and export profiles."""
from domain.models import ExportSettings, ZoneBounds, ZoneFeature, ZoneFeatureCollection
from domain.profiles import (
    delete_profile,
    ensure_profiles_dir,
    list_profiles,
    load_profile,
    save_profile,
)

__all__ = [
    'ExportSettings',
    'ZoneBounds',
    'ZoneFeature',
    'ZoneFeatureCollection',
    'delete_profile',
    'ensure_profiles_dir',
    'list_profiles',
    'load_profile',
    'save_profile',
]

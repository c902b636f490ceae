"""Services package - GeoJSON export."""

from services.export_service import (
    build_geojson,
    dumps_geojson,
    export_geojson,
    export_with_settings,
)

__all__ = [
    'build_geojson',
    'dumps_geojson',
    'export_geojson',
    'export_with_settings',
]

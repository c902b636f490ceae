from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from geo.gzd import get_all_gzd, get_gzd
from shared.constants import DEFAULT_GEOJSON_INDENT, POLAR_REGIONS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from domain.models import ExportSettings

logger = logging.getLogger(__name__)


def build_geojson(
    zones: Iterable[str] | None = None,
    *,
    include_polar: bool = True,
) -> dict[str, Any]:
    """
    Build a GeoJSON FeatureCollection of grid zones.

    With zones=None the whole grid is exported in generation order,
    otherwise the named zones are resolved in the given order.
    """
    if zones is None:
        features = list(get_all_gzd())
    else:
        features = [get_gzd(name) for name in zones]
    if not include_polar:
        features = [f for f in features if f.name not in POLAR_REGIONS]
    logger.debug('Exporting %d GZD features', len(features))
    return {
        'type': 'FeatureCollection',
        'features': [f.to_geojson() for f in features],
    }


def dumps_geojson(data: dict[str, Any], indent: int = DEFAULT_GEOJSON_INDENT) -> str:
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def export_geojson(
    out_path: str | Path,
    zones: Iterable[str] | None = None,
    *,
    include_polar: bool = True,
    indent: int = DEFAULT_GEOJSON_INDENT,
) -> Path:
    """Write GeoJSON to out_path and fsync to ensure data is written."""
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = build_geojson(zones, include_polar=include_polar)
    with path.open('w', encoding='utf-8') as fh:
        fh.write(dumps_geojson(data, indent))
        fh.flush()
        os.fsync(fh.fileno())
    logger.info('Saved %d zones to %s', len(data['features']), path)
    return path


def export_with_settings(settings: ExportSettings) -> str:
    """Export according to a profile; returns the JSON text when no output path is set."""
    zones = settings.zones or None
    if settings.output_path:
        export_geojson(
            settings.output_path,
            zones,
            include_polar=settings.include_polar,
            indent=settings.indent,
        )
        return ''
    data = build_geojson(zones, include_polar=settings.include_polar)
    return dumps_geojson(data, settings.indent)

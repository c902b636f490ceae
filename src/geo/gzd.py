from __future__ import annotations

import logging
import math
import re

from domain.models import ZoneBounds, ZoneFeature, ZoneFeatureCollection
from shared.constants import (
    GZD_MISSING,
    GZD_OVERLAYS,
    GZD_TOTAL_COUNT,
    LATITUDE_BAND_HEIGHT_DEG,
    LATITUDE_BAND_X_HEIGHT_DEG,
    LATITUDE_BANDS,
    LATITUDE_BANDS_SOUTH_DEG,
    LONGITUDE_BAND_WIDTH_DEG,
    LONGITUDE_ORIGIN_DEG,
    MAX_LONGITUDE_BAND,
    MIN_LONGITUDE_BAND,
    POLAR_REGIONS,
)

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r'([0-9]*)(.*)', re.DOTALL)


def validate_gzd(longitude_band: int, latitude_band: str) -> None:
    """Check that (longitude_band, latitude_band) names an existing grid zone."""
    if not (MIN_LONGITUDE_BAND <= longitude_band <= MAX_LONGITUDE_BAND):
        msg = (
            f'longitude_band must be between {MIN_LONGITUDE_BAND} and '
            f'{MAX_LONGITUDE_BAND}, got {longitude_band}'
        )
        raise ValueError(msg)
    if len(latitude_band) != 1:
        msg = f'Invalid latitude_band {latitude_band!r}, should be one letter'
        raise ValueError(msg)
    if latitude_band not in LATITUDE_BANDS:
        msg = f'Invalid latitude_band {latitude_band!r}, valid bands: {LATITUDE_BANDS}'
        raise ValueError(msg)
    if (longitude_band, latitude_band) in GZD_MISSING:
        msg = f'Zone {longitude_band}{latitude_band} does not exist'
        raise ValueError(msg)


def gzd_bounds(longitude_band: int, latitude_band: str) -> tuple[int, int, int, int]:
    """
    Rectangle (lng_min, lng_max, lat_min, lat_max) of a validated grid zone.

    Longitude bands 1..60 are 6° each from 180°W; latitude bands C..X are 8°
    each from 80°S, band X covering 12°. The Norway and Svalbard overlays
    are applied on top of the regular rule.
    """
    lng_min = LONGITUDE_ORIGIN_DEG + (longitude_band - 1) * LONGITUDE_BAND_WIDTH_DEG
    lng_max = lng_min + LONGITUDE_BAND_WIDTH_DEG

    i = LATITUDE_BANDS.index(latitude_band)
    lat_min = LATITUDE_BANDS_SOUTH_DEG + i * LATITUDE_BAND_HEIGHT_DEG
    if latitude_band == 'X':
        lat_max = lat_min + LATITUDE_BAND_X_HEIGHT_DEG
    else:
        lat_max = lat_min + LATITUDE_BAND_HEIGHT_DEG

    overlay = GZD_OVERLAYS.get((longitude_band, latitude_band))
    if overlay is not None:
        lng_min += overlay[0]
        lng_max += overlay[1]

    return lng_min, lng_max, lat_min, lat_max


def polar_region_bounds(band: str) -> tuple[int, int, int, int]:
    """Rectangle of polar region A, B (south) or X, Y (north)."""
    try:
        return POLAR_REGIONS[band]
    except KeyError:
        msg = f'Invalid polar band {band!r}, valid bands: {"".join(POLAR_REGIONS)}'
        raise ValueError(msg) from None


def parse_gzd_name(name: str) -> tuple[int | None, str]:
    """
    Split a GZD name into (longitude_band, band letter).

    The leading run of digits is the longitude band; a name without digits
    is a polar region and yields None. Empty names and names containing
    whitespace are format errors.
    """
    if not isinstance(name, str):
        msg = f'GZD name must be a string, got {type(name).__name__}'
        raise TypeError(msg)
    if not name or any(ch.isspace() for ch in name):
        msg = f'Malformed GZD name {name!r}'
        raise TypeError(msg)
    match = _NAME_RE.fullmatch(name)
    digits, band = match.group(1), match.group(2)  # type: ignore[union-attr]
    if not digits:
        return None, band
    return int(digits), band


def _is_polar(longitude_band: int | float | None) -> bool:
    if longitude_band is None:
        return True
    return isinstance(longitude_band, float) and math.isnan(longitude_band)


def _polar_feature(band: str) -> ZoneFeature:
    return ZoneFeature(name=band, bounds=ZoneBounds.from_tuple(polar_region_bounds(band)))


def _grid_feature(longitude_band: int, latitude_band: str) -> ZoneFeature:
    return ZoneFeature(
        name=f'{longitude_band}{latitude_band}',
        bounds=ZoneBounds.from_tuple(gzd_bounds(longitude_band, latitude_band)),
    )


def get_gzd(
    longitude_band: int | float | str | None,
    latitude_band: str | None = None,
) -> ZoneFeature:
    """
    Resolve one grid zone designator into a ZoneFeature.

    Accepts either a combined name, e.g. get_gzd('33V') or get_gzd('A'),
    or an explicit pair, e.g. get_gzd(33, 'V'). A longitude band of None
    or NaN selects a polar region: get_gzd(None, 'X').

    Raises:
        ValueError: zone outside the band tables or one of 32X, 34X, 36X.
        TypeError: arguments match neither calling shape or the name is malformed.
    """
    if isinstance(longitude_band, str):
        if latitude_band is not None:
            msg = 'get_gzd() takes either a GZD name or a (longitude_band, latitude_band) pair'
            raise TypeError(msg)
        longitude_band, latitude_band = parse_gzd_name(longitude_band)

    if not isinstance(latitude_band, str):
        msg = f'latitude_band must be a string, got {type(latitude_band).__name__}'
        raise TypeError(msg)

    if _is_polar(longitude_band):
        return _polar_feature(latitude_band)

    if isinstance(longitude_band, bool) or not isinstance(longitude_band, int):
        msg = f'longitude_band must be an integer, got {type(longitude_band).__name__}'
        raise TypeError(msg)

    validate_gzd(longitude_band, latitude_band)
    return _grid_feature(longitude_band, latitude_band)


def get_all_gzd() -> ZoneFeatureCollection:
    """
    All grid zones followed by the polar regions A, B, X, Y.

    Zones are generated longitude band first, then latitude band in table
    order; 32X, 34X and 36X are skipped.
    """
    features: list[ZoneFeature] = []
    for longitude_band in range(MIN_LONGITUDE_BAND, MAX_LONGITUDE_BAND + 1):
        for latitude_band in LATITUDE_BANDS:
            if (longitude_band, latitude_band) in GZD_MISSING:
                continue
            features.append(_grid_feature(longitude_band, latitude_band))

    features.extend(_polar_feature(band) for band in POLAR_REGIONS)

    logger.debug('Generated %d of %d GZD features', len(features), GZD_TOTAL_COUNT)
    return ZoneFeatureCollection(features=tuple(features))

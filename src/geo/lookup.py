from __future__ import annotations

from domain.models import ZoneFeature
from geo.gzd import get_gzd
from shared.constants import (
    GZD_OVERLAYS,
    LAT_MAX_DEG,
    LAT_MIN_DEG,
    LATITUDE_BAND_HEIGHT_DEG,
    LATITUDE_BANDS,
    LATITUDE_BANDS_NORTH_DEG,
    LATITUDE_BANDS_SOUTH_DEG,
    LNG_MAX_DEG,
    LNG_MIN_DEG,
    LONGITUDE_BAND_WIDTH_DEG,
    LONGITUDE_ORIGIN_DEG,
    MAX_LONGITUDE_BAND,
)


def _overlay_band(longitude_band: int, latitude_band: str, lng: float) -> int:
    """Longitude band after the Norway/Svalbard overlays for a point in the given row."""
    for (band, letter), (d_min, d_max) in GZD_OVERLAYS.items():
        if letter != latitude_band:
            continue
        lng_min = LONGITUDE_ORIGIN_DEG + (band - 1) * LONGITUDE_BAND_WIDTH_DEG + d_min
        lng_max = LONGITUDE_ORIGIN_DEG + band * LONGITUDE_BAND_WIDTH_DEG + d_max
        if lng_min <= lng < lng_max:
            return band
    return longitude_band


def determine_gzd(lng: float, lat: float) -> str:
    """
    Determine GZD name for a WGS84 point.

    South and west edges belong to the zone; 180°E falls into band 60
    and 90°N into the northern polar regions.
    """
    if not (LNG_MIN_DEG <= lng <= LNG_MAX_DEG and LAT_MIN_DEG <= lat <= LAT_MAX_DEG):
        msg = f'Point ({lng}, {lat}) is outside [-180, 180] x [-90, 90]'
        raise ValueError(msg)

    if lat < LATITUDE_BANDS_SOUTH_DEG:
        return 'A' if lng < 0 else 'B'
    if lat >= LATITUDE_BANDS_NORTH_DEG:
        return 'X' if lng < 0 else 'Y'

    i = min(int((lat - LATITUDE_BANDS_SOUTH_DEG) // LATITUDE_BAND_HEIGHT_DEG), len(LATITUDE_BANDS) - 1)
    latitude_band = LATITUDE_BANDS[i]

    longitude_band = min(
        MAX_LONGITUDE_BAND,
        int((lng - LONGITUDE_ORIGIN_DEG) // LONGITUDE_BAND_WIDTH_DEG) + 1,
    )
    longitude_band = _overlay_band(longitude_band, latitude_band, lng)
    return f'{longitude_band}{latitude_band}'


def find_gzd(lng: float, lat: float) -> ZoneFeature:
    """ZoneFeature containing the WGS84 point."""
    return get_gzd(determine_gzd(lng, lat))

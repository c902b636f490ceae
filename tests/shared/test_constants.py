"""Tests for constants module."""

from shared.constants import (
    GZD_MISSING,
    GZD_OVERLAYS,
    GZD_TOTAL_COUNT,
    LATITUDE_BANDS,
    POLAR_REGIONS,
)


class TestBandTables:
    """Tests for band tables."""

    def test_latitude_bands_canonical(self):
        """20 distinct letters C..X without I and O."""
        assert LATITUDE_BANDS == 'CDEFGHJKLMNPQRSTUVWX'
        assert len(set(LATITUDE_BANDS)) == 20
        assert 'I' not in LATITUDE_BANDS
        assert 'O' not in LATITUDE_BANDS

    def test_latitude_bands_sorted(self):
        assert ''.join(sorted(LATITUDE_BANDS)) == LATITUDE_BANDS

    def test_polar_regions_order(self):
        assert list(POLAR_REGIONS) == ['A', 'B', 'X', 'Y']

    def test_polar_regions_min_before_max(self):
        for lng_min, lng_max, lat_min, lat_max in POLAR_REGIONS.values():
            assert lng_min < lng_max
            assert lat_min < lat_max

    def test_overlays_and_missing_disjoint(self):
        assert not set(GZD_OVERLAYS) & GZD_MISSING

    def test_total_count(self):
        assert GZD_TOTAL_COUNT == 1201

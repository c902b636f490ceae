"""Tests for export_service module."""

import json

import pytest

from domain.models import ExportSettings
from services.export_service import (
    build_geojson,
    dumps_geojson,
    export_geojson,
    export_with_settings,
)


class TestBuildGeojson:
    """Tests for build_geojson function."""

    def test_all_zones(self):
        data = build_geojson()
        assert data['type'] == 'FeatureCollection'
        assert len(data['features']) == 1201

    def test_without_polar(self):
        data = build_geojson(include_polar=False)
        names = [f['properties']['name'] for f in data['features']]
        assert len(names) == 1197
        assert '60X' in names
        assert 'Y' not in names

    def test_named_zones_keep_order(self):
        data = build_geojson(['33V', 'A', '5D'])
        names = [f['properties']['name'] for f in data['features']]
        assert names == ['33V', 'A', '5D']

    def test_invalid_zone(self):
        with pytest.raises(ValueError):
            build_geojson(['34X'])


class TestDumpsGeojson:
    """Tests for dumps_geojson function."""

    def test_compact_when_indent_zero(self):
        text = dumps_geojson({'type': 'FeatureCollection', 'features': []}, indent=0)
        assert '\n' not in text

    def test_indented(self):
        text = dumps_geojson({'type': 'FeatureCollection', 'features': []}, indent=2)
        assert '\n  "type"' in text


class TestExportGeojson:
    """Tests for export_geojson function."""

    def test_writes_file(self, tmp_path):
        out = tmp_path / 'nested' / 'zones.geojson'
        result = export_geojson(out, ['31V', '32V'])
        assert result == out
        data = json.loads(out.read_text(encoding='utf-8'))
        assert [f['properties']['name'] for f in data['features']] == ['31V', '32V']
        assert data['features'][1]['geometry']['coordinates'][0][0] == [3, 56]


class TestExportWithSettings:
    """Tests for export_with_settings function."""

    def test_returns_text_without_output_path(self):
        text = export_with_settings(ExportSettings(zones=['Y'], indent=0))
        data = json.loads(text)
        assert data['features'][0]['properties']['name'] == 'Y'

    def test_writes_output_path(self, tmp_path):
        out = tmp_path / 'all.geojson'
        text = export_with_settings(ExportSettings(output_path=str(out), include_polar=False))
        assert text == ''
        data = json.loads(out.read_text(encoding='utf-8'))
        assert len(data['features']) == 1197

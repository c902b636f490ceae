from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, field_validator, model_validator
from shapely.geometry import Polygon

from shared.constants import (
    DEFAULT_GEOJSON_INDENT,
    DEFAULT_LOG_LEVEL,
    LAT_MAX_DEG,
    LAT_MIN_DEG,
    LNG_MAX_DEG,
    LNG_MIN_DEG,
    MAX_GEOJSON_INDENT,
)


class ZoneBounds(BaseModel):
    """Geographic rectangle of a grid zone, degrees WGS84."""

    model_config = {'frozen': True}

    # Целые градусы остаются int
    lng_min: int | float
    lng_max: int | float
    lat_min: int | float
    lat_max: int | float

    @field_validator('lng_min', 'lng_max')
    @classmethod
    def validate_longitude(cls, v: int | float) -> int | float:
        if not (LNG_MIN_DEG <= v <= LNG_MAX_DEG):
            msg = f'Longitude must be within [{LNG_MIN_DEG}, {LNG_MAX_DEG}], got {v}'
            raise ValueError(msg)
        return v

    @field_validator('lat_min', 'lat_max')
    @classmethod
    def validate_latitude(cls, v: int | float) -> int | float:
        if not (LAT_MIN_DEG <= v <= LAT_MAX_DEG):
            msg = f'Latitude must be within [{LAT_MIN_DEG}, {LAT_MAX_DEG}], got {v}'
            raise ValueError(msg)
        return v

    @model_validator(mode='after')
    def validate_order(self) -> ZoneBounds:
        if self.lng_min >= self.lng_max or self.lat_min >= self.lat_max:
            msg = (
                f'Bounds must satisfy min < max, got lng=({self.lng_min}, {self.lng_max}) '
                f'lat=({self.lat_min}, {self.lat_max})'
            )
            raise ValueError(msg)
        return self

    @classmethod
    def from_tuple(cls, values: tuple[int | float, ...]) -> ZoneBounds:
        lng_min, lng_max, lat_min, lat_max = values
        return cls(lng_min=lng_min, lng_max=lng_max, lat_min=lat_min, lat_max=lat_max)

    def as_tuple(self) -> tuple[int | float, ...]:
        return self.lng_min, self.lng_max, self.lat_min, self.lat_max

    @property
    def ring(self) -> list[list[int | float]]:
        """Closed ring SW -> NW -> NE -> SE -> SW as [lng, lat] pairs."""
        return [
            [self.lng_min, self.lat_min],
            [self.lng_min, self.lat_max],
            [self.lng_max, self.lat_max],
            [self.lng_max, self.lat_min],
            [self.lng_min, self.lat_min],
        ]

    def contains(self, lng: float, lat: float) -> bool:
        return self.lng_min <= lng <= self.lng_max and self.lat_min <= lat <= self.lat_max


class ZoneFeature(BaseModel):
    """Named grid zone polygon."""

    model_config = {'frozen': True}

    name: str
    bounds: ZoneBounds

    @property
    def ring(self) -> list[list[int | float]]:
        return self.bounds.ring

    def to_geojson(self) -> dict[str, Any]:
        return {
            'type': 'Feature',
            'properties': {'name': self.name},
            'geometry': {
                'type': 'Polygon',
                'coordinates': [self.ring],
            },
        }

    def to_shape(self) -> Polygon:
        return Polygon(self.ring)


class ZoneFeatureCollection(BaseModel):
    """Ordered collection of zone features, kept in generation order."""

    model_config = {'frozen': True}

    features: tuple[ZoneFeature, ...] = ()

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[ZoneFeature]:  # type: ignore[override]
        return iter(self.features)

    def names(self) -> list[str]:
        return [f.name for f in self.features]

    def get(self, name: str) -> ZoneFeature | None:
        """First feature with the given name (grid zones precede polar regions)."""
        for feature in self.features:
            if feature.name == name:
                return feature
        return None

    def to_geojson(self) -> dict[str, Any]:
        return {
            'type': 'FeatureCollection',
            'features': [f.to_geojson() for f in self.features],
        }


class ExportSettings(BaseModel):
    """Settings of a GeoJSON export, stored as a TOML profile."""

    model_config = {
        'extra': 'ignore',  # игнорировать лишние поля из профилей
    }

    # Путь к итоговому файлу; пустая строка — вывод в stdout
    output_path: str = ''
    # Отступ JSON
    indent: int = DEFAULT_GEOJSON_INDENT
    # Добавлять полярные области A, B, X, Y
    include_polar: bool = True
    # Список зон; пустой — вся сетка
    zones: list[str] = []
    # Уровень журнала
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator('indent')
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if not (0 <= v <= MAX_GEOJSON_INDENT):
            msg = f'indent must be within [0, {MAX_GEOJSON_INDENT}]'
            raise ValueError(msg)
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}:
            msg = f'Unknown log level: {v}'
            raise ValueError(msg)
        return level

"""Validated geographic value types used to build requests."""

from __future__ import annotations

from dataclasses import dataclass

from airly.errors import InvalidParameterError

ERR_OUT_OF_BOUNDS = "Value of passed argument out of bounds"
MAX_LAT = 90.0
MAX_LNG = 180.0
MAX_EARTH_RADIUS_KM = 6371


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees."""
    lat: float
    lng: float

    def __post_init__(self):
        if isinstance(self.lat, bool) or isinstance(self.lng, bool):
            raise InvalidParameterError(f"GeoPoint coordinates must be numbers, got lat: {self.lat!r} and lng: {self.lng!r}")
        # NaN fails both comparisons
        if not (abs(self.lat) <= MAX_LAT and abs(self.lng) <= MAX_LNG):
            raise InvalidParameterError(
                f"{ERR_OUT_OF_BOUNDS}, expected values for lat max: +/- {MAX_LAT} and "
                f"lng max: +/- {MAX_LNG}, got values for lat: {self.lat} and lng: {self.lng}"
            )


@dataclass(frozen=True)
class GeoCircle:
    """Search area: a center point plus a radius in kilometers."""
    point: GeoPoint
    radius_km: float

    def __post_init__(self):
        if not isinstance(self.point, GeoPoint):
            raise InvalidParameterError(f"GeoCircle point must be a GeoPoint, got {type(self.point).__name__}")
        if isinstance(self.radius_km, bool):
            raise InvalidParameterError(f"GeoCircle radius must be a number, got {self.radius_km!r}")
        if not (0 <= self.radius_km < MAX_EARTH_RADIUS_KM):
            raise InvalidParameterError(
                f"{ERR_OUT_OF_BOUNDS}, expected radius in range [0, {MAX_EARTH_RADIUS_KM}), "
                f"got radius value: {self.radius_km}"
            )

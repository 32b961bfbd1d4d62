"""Pydantic models mirroring the Airly API JSON schema.

Field names are snake_case in Python and camelCase on the wire; dump with
``by_alias=True`` to get the API's spelling back. Optional fields stay ``None``
when the API omits them. Required fields that are missing fail validation.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from airly.geo import GeoPoint


class _ApiModel(BaseModel):
    """Base model: accept both field names and aliases, ignore unknown keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Location(_ApiModel):
    """Installation coordinates as reported by the API."""
    latitude: float
    longitude: float

    def to_geo_point(self) -> GeoPoint:
        """Return the location as a validated GeoPoint."""
        return GeoPoint(self.latitude, self.longitude)


class Address(_ApiModel):
    """Postal address an installation is registered at."""
    country: str
    city: str
    street: str
    number: str
    display_address1: Optional[str] = Field(default=None, alias="displayAddress1")
    display_address2: Optional[str] = Field(default=None, alias="displayAddress2")


class Sponsor(_ApiModel):
    """Organisation funding an installation."""
    id: int
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    link: Optional[str] = None


class Installation(_ApiModel):
    """A registered air-quality monitoring station."""
    id: int
    location: Location
    address: Address
    elevation: float  # meters above sea level
    airly: bool  # first-party Airly sensor
    sponsor: Sponsor


class Value(_ApiModel):
    """A single raw measurement, e.g. PM10 or temperature."""
    name: Optional[str] = None
    value: Optional[float] = None


class Index(_ApiModel):
    """An air-quality index computed from raw values."""
    name: Optional[str] = None
    value: Optional[float] = None
    level: Optional[str] = None
    description: Optional[str] = None
    advice: Optional[str] = None
    color: Optional[str] = None  # css-style hex triplet


class Standard(_ApiModel):
    """A pollutant measurement compared against a regulatory limit."""
    name: Optional[str] = None
    pollutant: Optional[str] = None
    limit: Optional[float] = None
    percent: Optional[float] = None


class AveragedValues(_ApiModel):
    """Values, indexes and standards averaged over [from_date_time, till_date_time), UTC."""
    from_date_time: Optional[str] = Field(default=None, alias="fromDateTime")
    till_date_time: Optional[str] = Field(default=None, alias="tillDateTime")
    values: List[Value]
    indexes: List[Index]
    standards: List[Standard]


class Measurements(_ApiModel):
    """Current, historical and forecast readings for one location."""
    current: Optional[AveragedValues] = None
    history: List[AveragedValues]
    forecast: List[AveragedValues]


class IndexLevel(_ApiModel):
    """One band of an index scale."""
    min_value: Optional[float] = Field(default=None, alias="minValue")
    max_value: Optional[float] = Field(default=None, alias="maxValue")  # absent on the open-ended top level
    value: Optional[str] = Field(default=None, alias="values")  # range label, e.g. "0-25"
    level: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None


class IndexType(_ApiModel):
    """Index identifier; used both as a request parameter and in metadata responses."""
    name: Optional[str] = None
    level: Optional[IndexLevel] = None
    levels: List[IndexLevel] = Field(default_factory=list)


class MeasurementType(_ApiModel):
    """Metadata for a measurable quantity."""
    name: Optional[str] = None
    label: Optional[str] = None
    unit: Optional[str] = None

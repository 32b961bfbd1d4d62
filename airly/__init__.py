"""Client for the Airly air-quality REST API."""

from .client import AirlyClient
from .errors import (
    AirlyError,
    ConfigurationError,
    DeserializationError,
    InvalidParameterError,
    TransportError,
)
from .geo import GeoCircle, GeoPoint
from .models import (
    Address,
    AveragedValues,
    Index,
    IndexLevel,
    IndexType,
    Installation,
    Location,
    Measurements,
    MeasurementType,
    Sponsor,
    Standard,
    Value,
)

__all__ = [
    "AirlyClient",
    "AirlyError",
    "ConfigurationError",
    "DeserializationError",
    "InvalidParameterError",
    "TransportError",
    "GeoCircle",
    "GeoPoint",
    "Address",
    "AveragedValues",
    "Index",
    "IndexLevel",
    "IndexType",
    "Installation",
    "Location",
    "Measurements",
    "MeasurementType",
    "Sponsor",
    "Standard",
    "Value",
]

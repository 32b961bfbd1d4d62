"""Synchronous client for the Airly air-quality REST API (v2)."""
from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from airly import config, endpoints
from airly.errors import ConfigurationError, DeserializationError, InvalidParameterError, TransportError
from airly.geo import GeoCircle, GeoPoint
from airly.models import Installation, IndexType, Measurements, MeasurementType
from utils.logging_utils import get_tagged_logger, mask_headers

logger = get_tagged_logger(__name__, tag="airly/client")

T = TypeVar("T")

API_KEY_LENGTH = 32
MAX_LOGGED_BODY_CHARS = 500

ACCEPT_JSON = "application/json"
API_KEY_HEADER = "apikey"


def _format_number(value: float) -> str:
    """Render integral values without a fractional part (5.0 -> "5")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _index_name(index_type: IndexType) -> str:
    name = index_type.name if index_type is not None else None
    if not name:
        raise InvalidParameterError("IndexType.name is required for measurement requests")
    return name


def _validate_api_key(api_key: Any) -> str:
    if not isinstance(api_key, str):
        raise ConfigurationError(f"API key must be a string, got {type(api_key).__name__}")
    if len(api_key) != API_KEY_LENGTH:
        raise ConfigurationError(
            f"Wrong api key length, expected {API_KEY_LENGTH} characters, got {len(api_key)}"
        )
    # requests rejects header values with surrounding whitespace or line breaks
    if api_key != api_key.strip() or "\r" in api_key or "\n" in api_key:
        raise ConfigurationError("API key is not a valid header value")
    try:
        api_key.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ConfigurationError("API key is not a valid header value") from exc
    return api_key


class AirlyClient:
    """Client holding an API key and an HTTP session; one method per endpoint.

    Parameters are validated before any request is sent. Failures raise an
    :class:`airly.errors.AirlyError` subclass and are never retried.
    """

    def __init__(
        self,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        settings: Optional[config.Settings] = None,
    ):
        self._api_key = _validate_api_key(api_key)
        settings = settings or config.settings
        self.base_url = settings.base_url
        self.timeout = settings.request_timeout_seconds
        self.headers = {
            "Accept": ACCEPT_JSON,
            "Accept-Language": settings.language,
            API_KEY_HEADER: self._api_key,
        }
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[config.Settings] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> "AirlyClient":
        """Build a client using the API key from configuration (AIRLY_API_KEY)."""
        settings = settings or config.settings
        if not settings.api_key:
            raise ConfigurationError("No API key configured; set AIRLY_API_KEY")
        return cls(settings.api_key, session=session, settings=settings)

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "AirlyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AirlyClient(base_url={self.base_url!r})"

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def get_installation(self, installation_id: int) -> Installation:
        """Fetch a single installation by id."""
        url = f"{self.base_url}{endpoints.INSTALLATIONS}/{installation_id}"
        return self._get(url, Installation)

    def get_nearest(self, circle: GeoCircle, max_results: int) -> List[Installation]:
        """Fetch up to `max_results` installations within `circle`, nearest first."""
        if isinstance(max_results, bool) or max_results < 1:
            raise InvalidParameterError(f"max_results must be positive, got {max_results}")
        url = (
            f"{self.base_url}{endpoints.INSTALLATIONS}/{endpoints.NEAREST}"
            f"?lat={circle.point.lat}&lng={circle.point.lng}"
            f"&maxDistanceKM={_format_number(circle.radius_km)}&maxResults={max_results}"
        )
        return self._get(url, List[Installation])

    def get_indexes(self) -> List[IndexType]:
        """List the index types the API can compute."""
        return self._get(f"{self.base_url}{endpoints.INDEXES}", List[IndexType])

    def get_measurements_types(self) -> List[MeasurementType]:
        """List metadata for every measurable quantity."""
        return self._get(f"{self.base_url}{endpoints.MEASUREMENTS_TYPES}", List[MeasurementType])

    def get_installation_measurements(
        self,
        installation_id: int,
        index_type: IndexType,
        include_wind: bool = False,
    ) -> Measurements:
        """Fetch current, historical and forecast measurements for one installation."""
        name = _index_name(index_type)
        wind_query = "includeWind=true&" if include_wind else ""
        url = (
            f"{self.base_url}{endpoints.MEASUREMENTS}/{endpoints.INSTALLATION}"
            f"?{wind_query}indexType={name}&installationId={installation_id}"
        )
        return self._get(url, Measurements)

    def get_measurements_nearest(self, index_type: IndexType, circle: GeoCircle) -> Measurements:
        """Fetch measurements of the installation nearest to the center of `circle`."""
        name = _index_name(index_type)
        url = (
            f"{self.base_url}{endpoints.MEASUREMENTS}/{endpoints.NEAREST}"
            f"?indexType={name}&lat={circle.point.lat}&lng={circle.point.lng}"
            f"&maxDistanceKM={_format_number(circle.radius_km)}"
        )
        return self._get(url, Measurements)

    def get_measurements_point(self, index_type: IndexType, point: GeoPoint) -> Measurements:
        """Fetch measurements interpolated at an arbitrary point."""
        name = _index_name(index_type)
        url = (
            f"{self.base_url}{endpoints.MEASUREMENTS}/{endpoints.POINT}"
            f"?indexType={name}&lat={point.lat}&lng={point.lng}"
        )
        return self._get(url, Measurements)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _get(self, url: str, target: Type[T]) -> T:
        """GET `url` with the fixed headers and validate the JSON body into `target`."""
        logger.debug("GET %s headers=%s", url, mask_headers(self.headers))
        try:
            resp = self.session.get(url, headers=self.headers, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as exc:
            response = getattr(exc, "response", None)
            status_code = getattr(response, "status_code", None)
            logger.warning("Airly GET %s failed (status=%s): %s", url, status_code, exc)
            raise TransportError(f"GET {url} failed: {exc}", url=url, status_code=status_code) from exc

        # some test doubles may not expose .text
        body = getattr(resp, "text", None)
        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("Airly returned non-JSON body for %s", url)
            raise DeserializationError(
                f"Response from {url} is not valid JSON", url=url, body=_truncate(body)
            ) from exc

        try:
            return TypeAdapter(target).validate_python(data)
        except ValidationError as exc:
            logger.warning("Airly response for %s does not match schema: %d error(s)", url, exc.error_count())
            raise DeserializationError(
                f"Response from {url} does not match expected schema: {exc}", url=url, body=_truncate(body)
            ) from exc


def _truncate(body: Optional[str]) -> Optional[str]:
    if body is None:
        return None
    return body[:MAX_LOGGED_BODY_CHARS]

"""Geocoding client for normalizing listing addresses."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from realty.config import get_settings
from realty.exceptions import GeocodingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeocodedAddress:
    """Normalized address and coordinates returned by the geocoder."""

    address: str
    lat: float
    long: float


class GeocodingService:
    """Service for resolving free-text addresses via a Google-compatible geocoding API."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = get_settings()
        self.base_url = self.settings.geocoding_api_url
        self.api_key = self.settings.geocoding_api_key
        self.timeout = self.settings.geocoding_timeout_seconds
        self.transport = transport

    async def geocode(self, address: str) -> GeocodedAddress:
        """Resolve an address to its normalized form and coordinates.

        Raises GeocodingError on timeout, transport or HTTP errors, an empty
        result set, or a response that does not have the expected shape.
        No retries are attempted.
        """
        if not address or not address.strip():
            raise GeocodingError("Address is empty")

        params = {"address": address.strip()}
        if self.api_key:
            params["key"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            logger.warning(f"Geocoding timed out after {self.timeout}s for '{address}'")
            raise GeocodingError("Geocoding timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error calling geocoder: {e}")
            raise GeocodingError("Geocoder unavailable") from e
        except ValueError as e:
            logger.warning(f"Geocoder returned invalid JSON: {e}")
            raise GeocodingError("Malformed geocoder response") from e

        return self._parse_response(address, data)

    def _parse_response(self, address: str, data: Any) -> GeocodedAddress:
        """Pick the first result out of a geocoder payload."""
        if not isinstance(data, dict):
            raise GeocodingError("Malformed geocoder response")

        status = data.get("status", "OK")
        results = data.get("results") or []
        if status != "OK" or not results:
            logger.warning(f"Geocoder returned status {status} for '{address}'")
            raise GeocodingError(f"Unable to find address (status {status})")

        try:
            first = results[0]
            location = first["geometry"]["location"]
            return GeocodedAddress(
                address=str(first["formatted_address"]),
                lat=float(location["lat"]),
                long=float(location["lng"]),
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected geocoder payload for '{address}': {e}")
            raise GeocodingError("Malformed geocoder response") from e


def get_geocoding_service() -> GeocodingService:
    """Get a geocoding service instance."""
    return GeocodingService()

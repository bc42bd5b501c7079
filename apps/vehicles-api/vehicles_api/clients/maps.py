"""Reverse geocoding for car locations."""

from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass
from typing import Optional

import httpx

from vehicles_api.schemas.car import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Address:
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


ADDRESS_UNAVAILABLE = Address(address="Address unavailable")

# Stand-in for a geocoding provider
_ADDRESS_BOOK = (
    Address("777 Brockton Avenue", "Abington", "MA", "02351"),
    Address("30 Memorial Drive", "Avon", "MA", "02322"),
    Address("250 Hartford Avenue", "Bellingham", "MA", "02019"),
    Address("700 Oak Street", "Brockton", "MA", "02301"),
    Address("66-4 Parkhurst Rd", "Chelmsford", "MA", "01824"),
    Address("591 Memorial Dr", "Chicopee", "MA", "01020"),
    Address("55 Brooksby Village Way", "Danvers", "MA", "01923"),
    Address("137 Teaticket Hwy", "East Falmouth", "MA", "02536"),
    Address("42 Fairhaven Commons Way", "Fairhaven", "MA", "02719"),
    Address("374 William S Canning Blvd", "Fall River", "MA", "02721"),
    Address("121 Worcester Rd", "Framingham", "MA", "01701"),
    Address("677 Timpany Blvd", "Gardner", "MA", "01440"),
    Address("337 Russell St", "Hadley", "MA", "01035"),
    Address("295 Plymouth Street", "Halifax", "MA", "02338"),
    Address("1775 Washington St", "Hanover", "MA", "02339"),
    Address("280 Washington Street", "Hudson", "MA", "01749"),
)


def simulated_address(lat: float, lon: float) -> Address:
    """Deterministic pick from the address book for a lat/lon pair."""
    key = f"{lat:.6f},{lon:.6f}".encode("ascii")
    return _ADDRESS_BOOK[zlib.crc32(key) % len(_ADDRESS_BOOK)]


class MapsClient:
    """
    Resolves the address of a Location.

    Without a base_url the address comes from the simulated address book.
    With one, GET {base_url}/maps?lat=..&lon=.. is expected to answer
    {"address", "city", "state", "zip"}; failures fall back to
    ADDRESS_UNAVAILABLE.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self._http = http
        if self.base_url and self._http is None:
            self._http = httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._http is not None:
            self._http.close()

    def get_address(self, location: Location) -> Location:
        if self.base_url is None:
            address = simulated_address(location.lat, location.lon)
        else:
            address = self._fetch(location.lat, location.lon)

        return location.model_copy(
            update={
                "address": address.address,
                "city": address.city,
                "state": address.state,
                "zip": address.zip,
            }
        )

    def _fetch(self, lat: float, lon: float) -> Address:
        try:
            response = self._http.get(f"{self.base_url}/maps", params={"lat": lat, "lon": lon})
            response.raise_for_status()
            data = response.json()
            address = data["address"]
            if not isinstance(address, str) or not address.strip():
                raise ValueError(f"invalid address: {address!r}")
            return Address(
                address=address,
                city=data.get("city"),
                state=data.get("state"),
                zip=data.get("zip"),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Maps service unavailable for (%s, %s): %s", lat, lon, e)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Malformed maps payload for (%s, %s): %s", lat, lon, e)
        return ADDRESS_UNAVAILABLE

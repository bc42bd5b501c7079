"""Pricing service client."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)

PRICE_FALLBACK = "(consult price)"


class PriceClient:
    """
    Looks up the price of a vehicle on the pricing service.

    Failures never propagate: a car without a price record (or with the
    pricing service down) still renders, with PRICE_FALLBACK as price.
    """

    def __init__(self, base_url: str, *, http: Optional[httpx.Client] = None, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self._http = http or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def get_price(self, vehicle_id: int) -> str:
        """
        Return the price of a vehicle as "CURRENCY AMOUNT", e.g. "USD 15234.50".

        Args:
            vehicle_id: id of the car in the vehicles store.
        """
        url = f"{self.base_url}/prices/search/findByVehicleId"
        try:
            response = self._http.get(url, params={"vehicleId": vehicle_id})
            response.raise_for_status()
            return _format_price(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Pricing service returned %s for vehicle %s", e.response.status_code, vehicle_id
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Pricing service unavailable for vehicle %s: %s", vehicle_id, e)
        except (ValueError, KeyError, TypeError, InvalidOperation) as e:
            logger.warning("Malformed price payload for vehicle %s: %s", vehicle_id, e)
        return PRICE_FALLBACK


def _format_price(payload: Mapping[str, Any]) -> str:
    currency = payload["currency"]
    if not isinstance(currency, str) or not currency.strip():
        raise ValueError(f"invalid currency: {currency!r}")
    amount = Decimal(str(payload["price"])).quantize(Decimal("0.01"))
    currency = currency.strip()
    return f"{currency} {amount}"

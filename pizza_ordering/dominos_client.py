"""Domino's ordering API client for locating stores, reading menus and pricing orders."""

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import urlencode, urljoin

import requests

from pizza_ordering.base_client import OrderingPlatformClient
from pizza_ordering.currency import string_number_to_cents
from pizza_ordering.errors import (
    DecodeError,
    OrderRejectedError,
    SerializationError,
    TransportError,
)
from pizza_ordering.models import Address, CustomerIdentity, MenuItem, OrderPrice, Store

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://order.dominos.com/power/"

# The API refuses requests that do not look like they came from the order page.
REFERER = "https://order.dominos.com/en/pages/order/"

# Status sentinel returned when the store will not price an order.
_REJECTED_STATUS = -1


def _field(record: Mapping, name: str, default: Any = None) -> Any:
    """Look up a response field, falling back to a case-insensitive match."""
    if name in record:
        return record[name]
    lowered = name.lower()
    for key, value in record.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return default


def _object(value: Any, what: str) -> Mapping:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DecodeError(f"expected an object for {what}, got {type(value).__name__}")
    return value


def _int(value: Any, what: str) -> int:
    if value is None or isinstance(value, bool):
        raise DecodeError(f"expected an integer for {what}, got {value!r}")
    if isinstance(value, Decimal) and value != value.to_integral_value():
        raise DecodeError(f"expected an integer for {what}, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DecodeError(f"expected an integer for {what}, got {value!r}") from exc


def _str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"expected a string for {what}, got {value!r}")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _minutes(value: Any) -> int:
    if value is None:
        return 0
    return _int(value, "delivery wait minutes")


def build_price_order_request(
    store_id: str,
    address: Address,
    products: Mapping[str, int],
    identity: CustomerIdentity,
) -> dict:
    """Build the order envelope expected by the price-order endpoint.

    Args:
        store_id: Store that will fulfil the order.
        address: Delivery address, embedded as-is.
        products: Mapping of product code to quantity.
        identity: Customer details copied into the order.

    Returns:
        A JSON-serializable dict with a single "Order" key.
    """
    order_products = [
        {
            "Code": code,
            "ID": 1,
            "isNew": True,
            "Qty": qty,
            "AutoRemove": False,
        }
        for code, qty in products.items()
    ]

    return {
        "Order": {
            "Address": address.to_json(),
            "Coupons": [],
            "CustomerID": "",
            "Extension": "",
            "OrderChannel": "OLO",
            "OrderID": "",
            "NoCombine": True,
            "OrderMethod": "Web",
            "OrderTaker": None,
            "Payments": [{"Type": "Cash"}],
            "Products": order_products,
            "Market": "",
            "Currency": "",
            "ServiceMethod": "Delivery",
            "Tags": {},
            "Version": "1.0",
            "SourceOrganizationURI": "order.dominos.com",
            "LanguageCode": "en",
            "Partners": {},
            "NewUser": True,
            "metaData": {},
            "Amounts": {},
            "BusinessDate": "",
            "EstimatedWaitMinutes": "",
            "PriceOrderTime": "",
            "AmountBreakdown": {},
            "StoreID": store_id,
            "Email": identity.email,
            "FirstName": identity.first_name,
            "LastName": identity.last_name,
            "Phone": identity.phone,
        }
    }


class DominosClient(OrderingPlatformClient):
    """Client for the Domino's online ordering ("power") API."""

    def __init__(
        self,
        identity: CustomerIdentity,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        debug: bool = False,
        timeout: float | None = None,
    ):
        self.identity = identity
        self.base_url = base_url
        self.session = session or requests.Session()
        self.debug = debug
        self.timeout = timeout

    def _do(self, method: str, path: str, payload: Any = None) -> Any:
        """Send one request to the API and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: URL, or a reference relative to base_url.
            payload: Optional object sent as a JSON request body.

        Returns:
            The parsed response body. JSON numbers with a fractional part
            are returned as Decimal.
        """
        url = urljoin(self.base_url, path)
        headers = {"Referer": REFERER}

        data = None
        if payload is not None:
            try:
                data = json.dumps(payload)
            except (TypeError, ValueError) as exc:
                raise SerializationError(f"cannot encode request for {path}: {exc}") from exc
            headers["Content-Type"] = "application/json"

        if self.debug:
            logger.info("--> %s %s\n%s\n\n%s", method, url, _dump_headers(headers), data or "")

        try:
            resp = self.session.request(
                method, url, data=data, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if self.debug:
            logger.info(
                "<-- %s %s\n%s\n\n%s",
                resp.status_code,
                resp.reason,
                _dump_headers(resp.headers),
                resp.text,
            )

        try:
            return resp.json(parse_float=Decimal, parse_constant=_reject_constant)
        except ValueError as exc:
            raise DecodeError(
                f"{method} {url} returned a non-JSON body (HTTP {resp.status_code})"
            ) from exc

    def get_delivery_stores(self, address: Address) -> list[Store]:
        """Find stores that will deliver to an address.

        Args:
            address: The delivery address.

        Returns:
            Delivery-capable stores in the order the API lists them. Empty
            when no store delivers to the address.
        """
        query = urlencode(
            sorted({"s": [address.street, "Delivery"], "c": address.city_line}.items()),
            doseq=True,
        )
        data = _object(self._do("GET", f"store-locator?{query}"), "store locator")

        records = _field(data, "Stores")
        if records is None:
            records = []
        if not isinstance(records, list):
            raise DecodeError("expected a list of stores")

        stores: list[Store] = []
        for record in records:
            record = _object(record, "store")
            if _field(record, "IsDeliveryStore") is not True:
                continue

            waits = _object(_field(record, "ServiceMethodEstimatedWaitMinutes"), "wait minutes")
            delivery = _object(_field(waits, "Delivery"), "delivery wait")
            stores.append(
                Store(
                    id=_str(_field(record, "StoreID"), "store id"),
                    delivery_minutes=_minutes(_field(delivery, "Min")),
                )
            )

        logger.debug("%d delivery store(s) near %s", len(stores), address.city_line)
        return stores

    def get_menu_items(self, store_id: str) -> list[MenuItem]:
        """Fetch every purchasable variant on a store's menu.

        Raises:
            ConversionError: If any variant's price is malformed. No partial
                menu is returned.
        """
        data = _object(
            self._do("GET", f"store/{store_id}/menu?lang=en&structured=true"),
            "menu",
        )
        variants = _object(_field(data, "Variants"), "variants")

        items: list[MenuItem] = []
        for variant in variants.values():
            variant = _object(variant, "variant")
            items.append(
                MenuItem(
                    code=_str(_field(variant, "Code"), "variant code"),
                    name=_str(_field(variant, "Name"), "variant name"),
                    price_cents=string_number_to_cents(_field(variant, "Price")),
                )
            )
        return items

    def price_order(
        self,
        store_id: str,
        address: Address,
        products: Mapping[str, int],
    ) -> OrderPrice:
        """Price a candidate delivery order without placing it.

        Args:
            store_id: Store identifier from get_delivery_stores().
            address: The delivery address.
            products: Mapping of product code to quantity.

        Returns:
            OrderPrice with delivery fee, tax and customer total in cents.

        Raises:
            OrderRejectedError: If the store declines to price the order.
            ConversionError: If an amount in the breakdown is malformed.
        """
        body = build_price_order_request(store_id, address, products, self.identity)
        data = _object(self._do("POST", "price-order", body), "price order")

        status = _int(_field(data, "Status"), "order status")
        if status == _REJECTED_STATUS:
            raise OrderRejectedError(store_id, status)

        order = _object(_field(data, "Order"), "order")
        breakdown = _object(_field(order, "AmountsBreakdown"), "amounts breakdown")

        return OrderPrice(
            id=_str(_field(order, "OrderID"), "order id"),
            delivery_cents=string_number_to_cents(_field(breakdown, "DeliveryFee")),
            tax_cents=string_number_to_cents(_field(breakdown, "Tax")),
            customer_cents=string_number_to_cents(_field(breakdown, "Customer")),
        )


def _dump_headers(headers: Mapping[str, str]) -> str:
    return "\n".join(f"{name}: {value}" for name, value in headers.items())

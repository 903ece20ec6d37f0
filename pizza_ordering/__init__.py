"""Client library for locating pizza stores, reading menus and pricing orders."""

from pizza_ordering.base_client import OrderingPlatformClient
from pizza_ordering.currency import string_number_to_cents
from pizza_ordering.dominos_client import DominosClient, build_price_order_request
from pizza_ordering.errors import (
    ConversionError,
    DecodeError,
    OrderingError,
    OrderRejectedError,
    SerializationError,
    TransportError,
)
from pizza_ordering.models import Address, CustomerIdentity, MenuItem, OrderPrice, Store

__all__ = [
    "Address",
    "ConversionError",
    "CustomerIdentity",
    "DecodeError",
    "DominosClient",
    "MenuItem",
    "OrderPrice",
    "OrderRejectedError",
    "OrderingError",
    "OrderingPlatformClient",
    "SerializationError",
    "Store",
    "TransportError",
    "build_price_order_request",
    "string_number_to_cents",
]

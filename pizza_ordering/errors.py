"""Exceptions raised by the pizza ordering client."""


class OrderingError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(OrderingError):
    """The HTTP exchange could not be completed."""


class SerializationError(OrderingError):
    """A request payload could not be encoded as JSON."""


class DecodeError(OrderingError):
    """A response body was not JSON or did not have the expected shape."""


class ConversionError(OrderingError):
    """A currency string could not be converted to cents."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"cannot convert {value!r} to cents")


class OrderRejectedError(OrderingError):
    """The upstream API declined to price the order."""

    def __init__(self, store_id: str, status: int = -1):
        self.store_id = store_id
        self.status = status
        super().__init__(
            f"store {store_id} rejected the order (status {status})"
        )

"""Shared data models for the pizza ordering client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Address:
    """A delivery address supplied by the caller."""

    street: str
    city: str
    region: str
    postal_code: str
    type: str = "House"

    @property
    def city_line(self) -> str:
        return f"{self.city}, {self.region} {self.postal_code}"

    def to_json(self) -> dict:
        """Return the address in the upstream wire format."""
        return {
            "Street": self.street,
            "City": self.city,
            "Region": self.region,
            "PostalCode": self.postal_code,
            "Type": self.type,
        }


@dataclass(frozen=True)
class Store:
    """A store that accepts delivery orders."""

    id: str
    delivery_minutes: int


@dataclass(frozen=True)
class MenuItem:
    """A purchasable menu variant."""

    code: str
    name: str
    price_cents: int


@dataclass(frozen=True)
class OrderPrice:
    """Price breakdown for a candidate order, in cents."""

    id: str
    delivery_cents: int
    tax_cents: int
    customer_cents: int


@dataclass(frozen=True)
class CustomerIdentity:
    """Customer details sent with every price-order request."""

    email: str
    first_name: str
    last_name: str
    phone: str

    @classmethod
    def from_env(cls) -> "CustomerIdentity":
        """Build an identity from PIZZA_* environment variables or a .env file.

        Raises:
            ValueError: If any of the variables is unset or empty.
        """
        load_dotenv()
        values = {
            "email": os.getenv("PIZZA_EMAIL", ""),
            "first_name": os.getenv("PIZZA_FIRST_NAME", ""),
            "last_name": os.getenv("PIZZA_LAST_NAME", ""),
            "phone": os.getenv("PIZZA_PHONE", ""),
        }
        if not all(values.values()):
            raise ValueError(
                "PIZZA_EMAIL, PIZZA_FIRST_NAME, PIZZA_LAST_NAME, and PIZZA_PHONE "
                "must be set either in the environment or in a .env file."
            )
        return cls(**values)

"""Abstract base class for food-ordering platform clients."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from pizza_ordering.models import Address, MenuItem, OrderPrice, Store


class OrderingPlatformClient(ABC):
    """Base class that all ordering platform clients must implement."""

    @abstractmethod
    def get_delivery_stores(self, address: Address) -> list[Store]:
        """Find stores that will deliver to an address.

        Args:
            address: The delivery address.

        Returns:
            List of delivery-capable stores, possibly empty.
        """

    @abstractmethod
    def get_menu_items(self, store_id: str) -> list[MenuItem]:
        """Fetch every purchasable variant on a store's menu.

        Args:
            store_id: Store identifier from get_delivery_stores().

        Returns:
            List of MenuItem objects in no particular order.
        """

    @abstractmethod
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
            The order's price breakdown.
        """

"""Order fixture repository."""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from ilp_rest.services.orders.models import Order, OrderStatus
from ilp_rest.services.orders.storage import read_orders

logger = logging.getLogger(__name__)


class OrderRepository:
    """Lookups over the order fixture file.

    The file is parsed again on every call; there is no cache.
    """

    def __init__(self, orders_file: Path):
        self.orders_file = Path(orders_file)

    def _load(self) -> List[Order]:
        logger.debug(f"[ORDERS] Loading orders from {self.orders_file}")
        return read_orders(self.orders_file)

    async def get_orders(self, order_date: Optional[date] = None) -> List[Order]:
        """Get all orders, or only those placed on a given date."""
        orders = self._load()
        if order_date is None:
            return orders
        return [order for order in orders if order.order_date == order_date]

    async def get_order(self, order_no: str) -> Optional[Order]:
        """Get an order by its number."""
        for order in self._load():
            if order.order_no == order_no:
                return order
        return None

    async def has_status(self, order_no: str, status: OrderStatus) -> bool:
        """Check an order's status; False if the order does not exist."""
        order = await self.get_order(order_no)
        return order is not None and order.order_status == status

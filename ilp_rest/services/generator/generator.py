"""Sample order fixture generator."""
import logging
import random
from datetime import date, timedelta
from typing import Iterator, List, Optional, Set

from faker import Faker

from ilp_rest.services.generator.corruptions import CORRUPTIONS, CorruptionContext
from ilp_rest.services.generator.selector import RestaurantSelector
from ilp_rest.services.generator.validation import validate_reference_data
from ilp_rest.services.orders.models import (
    InvalidOrderReasonCode,
    Order,
    OrderStatus,
    order_total,
)

logger = logging.getLogger(__name__)

MAX_ORDER_NO = 2**31 - 1


def date_range(start_date: date, duration_days: int) -> Iterator[date]:
    """Yield every date in [start_date, start_date + duration_days)."""
    for offset in range(duration_days):
        yield start_date + timedelta(days=offset)


class OrderGenerator:
    """Builds a fixture of valid orders plus one invalid order per reason and day."""

    def __init__(self, selector: RestaurantSelector, seed: Optional[int] = None):
        """
        Args:
            selector: source of the restaurant for each new order
            seed: makes the output reproducible when given
        """
        self.selector = selector
        self.random = random.Random(seed)
        self.faker = Faker()
        self.faker.seed_instance(seed)
        self._issued_order_nos: Set[str] = set()
        self._context = CorruptionContext(random=self.random, restaurants=selector.restaurants)

    def _new_order_no(self) -> str:
        while True:
            order_no = f"{self.random.randint(1, MAX_ORDER_NO):08X}"
            if order_no not in self._issued_order_nos:
                self._issued_order_nos.add(order_no)
                return order_no

    def _card_expiry(self, order_date: date) -> str:
        year = (order_date.year + self.random.randint(1, 4)) % 100
        return f"{self.random.randint(1, 12):02d}/{year:02d}"

    def make_base_order(self, order_date: date) -> Order:
        """Create a valid, delivered order from the next restaurant's full menu."""
        restaurant = self.selector.next()
        pizzas = list(restaurant.menu)
        card_type = self.random.choice(["visa16", "mastercard"])

        return Order(
            order_no=self._new_order_no(),
            order_date=order_date,
            customer=self.faker.name(),
            credit_card_number=self.faker.credit_card_number(card_type=card_type),
            credit_card_expiry=self._card_expiry(order_date),
            cvv=self.faker.credit_card_security_code(card_type=card_type),
            price_total_in_pence=order_total(pizzas),
            pizzas_in_order=pizzas,
            order_status=OrderStatus.DELIVERED,
            invalid_order_reason_code=InvalidOrderReasonCode.NO_ERROR,
        )

    def make_invalid_order(self, order_date: date, reason: InvalidOrderReasonCode) -> Order:
        """Create an order that is invalid for exactly the given reason."""
        corruption = CORRUPTIONS[reason]
        return corruption(self.make_base_order(order_date), self._context)

    def generate(
        self,
        start_date: date,
        duration_days: int,
        valid_orders_per_day: int,
    ) -> List[Order]:
        """
        Generate the complete fixture.

        All invalid orders come first, one per reason code and day, followed by
        the valid orders for each day.

        Raises:
            ReferenceDataError: if the restaurants cannot support every rule
        """
        validate_reference_data(self.selector.restaurants)

        orders: List[Order] = []
        for order_date in date_range(start_date, duration_days):
            for reason in InvalidOrderReasonCode:
                if reason == InvalidOrderReasonCode.NO_ERROR:
                    continue
                orders.append(self.make_invalid_order(order_date, reason))
        invalid_count = len(orders)

        for order_date in date_range(start_date, duration_days):
            for _ in range(valid_orders_per_day):
                orders.append(self.make_base_order(order_date))

        logger.info(
            f"[GENERATOR] Generated {len(orders)} orders - "
            f"{invalid_count} invalid, {len(orders) - invalid_count} valid, "
            f"{duration_days} days from {start_date.isoformat()}"
        )
        return orders

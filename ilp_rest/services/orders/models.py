"""Order models."""
from datetime import date
from enum import Enum
from typing import List

from pydantic import Field

from ilp_rest.core.constants import ORDER_CHARGE_IN_PENCE
from ilp_rest.services.reference.models import IlpModel, Pizza


class OrderStatus(str, Enum):
    """Outcome of processing an order."""

    DELIVERED = "DELIVERED"
    INVALID = "INVALID"
    VALID_BUT_NOT_DELIVERED = "VALID_BUT_NOT_DELIVERED"
    UNDEFINED = "UNDEFINED"

    def __str__(self) -> str:
        return self.value


class InvalidOrderReasonCode(str, Enum):
    """Why an order is invalid; NO_ERROR for every other status."""

    CVV = "CVV"
    CARD_NUMBER = "CARD_NUMBER"
    TOTAL = "TOTAL"
    EXPIRY_DATE = "EXPIRY_DATE"
    PIZZA_NOT_DEFINED = "PIZZA_NOT_DEFINED"
    MAX_PIZZA_COUNT_EXCEEDED = "MAX_PIZZA_COUNT_EXCEEDED"
    MULTIPLE_RESTAURANTS = "MULTIPLE_RESTAURANTS"
    RESTAURANT_CLOSED = "RESTAURANT_CLOSED"
    NO_ERROR = "NO_ERROR"

    def __str__(self) -> str:
        return self.value


def order_total(pizzas: List[Pizza]) -> int:
    """Price of a list of pizzas including the delivery charge."""
    return sum(pizza.price_in_pence for pizza in pizzas) + ORDER_CHARGE_IN_PENCE


class PublicOrder(IlpModel):
    """An order as handed to students, without its expected outcome."""

    order_no: str = Field(..., pattern=r"^[0-9A-F]{8}$")
    order_date: date
    customer: str
    credit_card_number: str
    credit_card_expiry: str
    cvv: str
    price_total_in_pence: int
    pizzas_in_order: List[Pizza]


class Order(PublicOrder):
    """An order together with the outcome a correct validator must reach."""

    order_status: OrderStatus = OrderStatus.UNDEFINED
    invalid_order_reason_code: InvalidOrderReasonCode = InvalidOrderReasonCode.NO_ERROR

    def to_public(self) -> PublicOrder:
        """Strip the outcome fields."""
        return PublicOrder.model_validate(
            self.model_dump(exclude={"order_status", "invalid_order_reason_code"})
        )

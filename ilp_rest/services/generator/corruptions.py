"""Invalid-order rules.

Each rule takes a valid order and returns a new order that fails exactly one
check, marked INVALID with the matching reason code. Rules never modify the
order they are given.
"""
import random
import string
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from ilp_rest.core.constants import (
    CARD_NUMBER_LENGTH,
    CVV_LENGTH,
    MAX_PIZZAS_PER_ORDER,
    UNDEFINED_PIZZA_NAME,
)
from ilp_rest.services.generator.validation import ReferenceDataError
from ilp_rest.services.orders.models import (
    InvalidOrderReasonCode,
    Order,
    OrderStatus,
    order_total,
)
from ilp_rest.services.reference.models import DayOfWeek, Pizza, Restaurant


@dataclass
class CorruptionContext:
    """What a rule may draw on besides the order itself."""

    random: random.Random
    restaurants: Sequence[Restaurant]


Corruption = Callable[[Order, CorruptionContext], Order]


def _digits(rng: random.Random, length: int) -> str:
    return "".join(rng.choice(string.digits) for _ in range(length))


def _invalid(order: Order, reason: InvalidOrderReasonCode, **changes) -> Order:
    if "pizzas_in_order" in changes and "price_total_in_pence" not in changes:
        changes["price_total_in_pence"] = order_total(changes["pizzas_in_order"])
    return order.model_copy(
        update={
            **changes,
            "order_status": OrderStatus.INVALID,
            "invalid_order_reason_code": reason,
        }
    )


def invalid_cvv(order: Order, ctx: CorruptionContext) -> Order:
    length = ctx.random.randint(1, 7)
    if length == CVV_LENGTH:
        length += 1
    return _invalid(order, InvalidOrderReasonCode.CVV, cvv=_digits(ctx.random, length))


def invalid_card_number(order: Order, ctx: CorruptionContext) -> Order:
    length = ctx.random.randint(1, CARD_NUMBER_LENGTH - 1)
    return _invalid(
        order,
        InvalidOrderReasonCode.CARD_NUMBER,
        credit_card_number=_digits(ctx.random, length),
    )


def invalid_total(order: Order, ctx: CorruptionContext) -> Order:
    delta = ctx.random.randint(-100, 999)
    if delta == 0:
        delta = 1
    return _invalid(
        order,
        InvalidOrderReasonCode.TOTAL,
        price_total_in_pence=order.price_total_in_pence + delta,
    )


def invalid_expiry_date(order: Order, ctx: CorruptionContext) -> Order:
    # Years 02..18 lie before any order date; months above 12 do not exist
    expiry = f"{ctx.random.randint(1, 19):02d}/{ctx.random.randint(2, 18):02d}"
    return _invalid(order, InvalidOrderReasonCode.EXPIRY_DATE, credit_card_expiry=expiry)


def undefined_pizza(order: Order, ctx: CorruptionContext) -> Order:
    surprise = Pizza(name=UNDEFINED_PIZZA_NAME, price_in_pence=ctx.random.randint(500, 2000))
    return _invalid(
        order,
        InvalidOrderReasonCode.PIZZA_NOT_DEFINED,
        pizzas_in_order=[*order.pizzas_in_order, surprise],
    )


def too_many_pizzas(order: Order, ctx: CorruptionContext) -> Order:
    # Repeat pizzas the restaurant really sells so only the count is wrong
    pizzas: List[Pizza] = list(order.pizzas_in_order)
    extra = 0
    while extra < 4 or len(pizzas) <= MAX_PIZZAS_PER_ORDER:
        pizzas.append(order.pizzas_in_order[extra % len(order.pizzas_in_order)])
        extra += 1
    return _invalid(
        order,
        InvalidOrderReasonCode.MAX_PIZZA_COUNT_EXCEEDED,
        pizzas_in_order=pizzas,
    )


def multiple_restaurants(order: Order, ctx: CorruptionContext) -> Order:
    first_pizza = order.pizzas_in_order[0].name
    owner = next((r for r in ctx.restaurants if r.sells(first_pizza)), None)
    if owner is None:
        raise ReferenceDataError(f"No restaurant sells '{first_pizza}'")

    other = ctx.restaurants[1] if ctx.restaurants[0] is owner else ctx.restaurants[0]
    return _invalid(
        order,
        InvalidOrderReasonCode.MULTIPLE_RESTAURANTS,
        pizzas_in_order=[*order.pizzas_in_order, other.menu[0]],
    )


def restaurant_closed(order: Order, ctx: CorruptionContext) -> Order:
    closed = next((r for r in ctx.restaurants if not r.is_open_on(order.order_date)), None)
    if closed is None:
        raise ReferenceDataError(
            f"No restaurant found which is not open on: {DayOfWeek.of(order.order_date)}"
        )
    return _invalid(
        order,
        InvalidOrderReasonCode.RESTAURANT_CLOSED,
        pizzas_in_order=[closed.menu[0]],
    )


CORRUPTIONS: Dict[InvalidOrderReasonCode, Corruption] = {
    InvalidOrderReasonCode.CVV: invalid_cvv,
    InvalidOrderReasonCode.CARD_NUMBER: invalid_card_number,
    InvalidOrderReasonCode.TOTAL: invalid_total,
    InvalidOrderReasonCode.EXPIRY_DATE: invalid_expiry_date,
    InvalidOrderReasonCode.PIZZA_NOT_DEFINED: undefined_pizza,
    InvalidOrderReasonCode.MAX_PIZZA_COUNT_EXCEEDED: too_many_pizzas,
    InvalidOrderReasonCode.MULTIPLE_RESTAURANTS: multiple_restaurants,
    InvalidOrderReasonCode.RESTAURANT_CLOSED: restaurant_closed,
}

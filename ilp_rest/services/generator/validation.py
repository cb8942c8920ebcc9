"""Checks the reference data must pass before orders can be generated."""
from typing import Dict, Sequence

from ilp_rest.core.constants import MAX_PIZZAS_PER_ORDER, UNDEFINED_PIZZA_NAME
from ilp_rest.services.reference.models import DayOfWeek, Restaurant


class ReferenceDataError(Exception):
    """The restaurant reference data cannot produce a complete order fixture."""


def validate_reference_data(restaurants: Sequence[Restaurant]) -> None:
    """
    Verify the restaurants support every invalid-order rule.

    Raises:
        ReferenceDataError: on the first violated precondition
    """
    if len(restaurants) < 2:
        raise ReferenceDataError(
            f"At least two restaurants are needed to mix pizzas, got {len(restaurants)}"
        )

    for restaurant in restaurants:
        if not restaurant.menu:
            raise ReferenceDataError(f"Restaurant '{restaurant.name}' has an empty menu")
        if len(restaurant.menu) > MAX_PIZZAS_PER_ORDER:
            raise ReferenceDataError(
                f"Restaurant '{restaurant.name}' has {len(restaurant.menu)} pizzas, "
                f"more than the {MAX_PIZZAS_PER_ORDER} allowed in one order"
            )
        if not restaurant.opening_days:
            raise ReferenceDataError(f"Restaurant '{restaurant.name}' has no opening days")
        if restaurant.sells(UNDEFINED_PIZZA_NAME):
            raise ReferenceDataError(
                f"Restaurant '{restaurant.name}' sells '{UNDEFINED_PIZZA_NAME}', "
                "which is reserved for undefined pizzas"
            )

    # Pizzas are traced back to their restaurant by name
    sellers: Dict[str, str] = {}
    for restaurant in restaurants:
        for pizza in restaurant.menu:
            seller = sellers.setdefault(pizza.name, restaurant.name)
            if seller != restaurant.name:
                raise ReferenceDataError(
                    f"Pizza '{pizza.name}' is sold by both '{seller}' and '{restaurant.name}'"
                )

    for day in DayOfWeek:
        if all(day in restaurant.opening_days for restaurant in restaurants):
            raise ReferenceDataError(f"No restaurant found which is not open on: {day}")

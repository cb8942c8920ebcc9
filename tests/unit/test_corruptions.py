"""Unit tests for the invalid-order rules."""
import random
import pytest
from datetime import date

from ilp_rest.core.constants import MAX_PIZZAS_PER_ORDER, UNDEFINED_PIZZA_NAME
from ilp_rest.services.generator.corruptions import (
    CORRUPTIONS,
    CorruptionContext,
    invalid_card_number,
    invalid_cvv,
    invalid_expiry_date,
    invalid_total,
    multiple_restaurants,
    restaurant_closed,
    too_many_pizzas,
    undefined_pizza,
)
from ilp_rest.services.generator.validation import ReferenceDataError
from ilp_rest.services.orders.models import (
    InvalidOrderReasonCode,
    OrderStatus,
    order_total,
)
from ilp_rest.services.reference.models import DayOfWeek, Restaurant


FRIDAY = date(2023, 9, 1)
MONDAY = date(2023, 9, 4)


@pytest.fixture
def context(restaurants):
    """Corruption context with a seeded RNG."""
    return CorruptionContext(random=random.Random(42), restaurants=restaurants)


@pytest.fixture
def base_order(order_generator):
    """A valid order from the first test restaurant (Pizzeria Uno)."""
    return order_generator.make_base_order(MONDAY)


def assert_invalid(order, reason):
    assert order.order_status == OrderStatus.INVALID
    assert order.invalid_order_reason_code == reason


class TestCorruptionTable:
    """Test the reason code to rule mapping."""

    def test_every_invalid_reason_has_a_rule(self):
        """All reason codes except NO_ERROR are covered."""
        expected = set(InvalidOrderReasonCode) - {InvalidOrderReasonCode.NO_ERROR}
        assert set(CORRUPTIONS) == expected

    @pytest.mark.parametrize("reason", list(CORRUPTIONS))
    def test_rule_sets_status_and_reason(self, reason, base_order, context):
        """Each rule marks its order INVALID with its own reason."""
        corrupted = CORRUPTIONS[reason](base_order, context)

        assert_invalid(corrupted, reason)
        assert corrupted.order_no == base_order.order_no
        assert corrupted.order_date == base_order.order_date

    @pytest.mark.parametrize("reason", list(CORRUPTIONS))
    def test_rule_leaves_input_untouched(self, reason, base_order, context):
        """Rules return a new order."""
        before = base_order.model_dump()

        CORRUPTIONS[reason](base_order, context)

        assert base_order.model_dump() == before
        assert base_order.order_status == OrderStatus.DELIVERED


class TestPaymentRules:
    """Test the card detail rules."""

    def test_cvv_never_three_digits(self, base_order, context):
        """Invalid CVVs are numeric and never of valid length."""
        for _ in range(200):
            cvv = invalid_cvv(base_order, context).cvv
            assert cvv.isdigit()
            assert 1 <= len(cvv) <= 7
            assert len(cvv) != 3

    def test_card_number_too_short(self, base_order, context):
        """Invalid card numbers are numeric and shorter than 16 digits."""
        for _ in range(200):
            number = invalid_card_number(base_order, context).credit_card_number
            assert number.isdigit()
            assert 1 <= len(number) <= 15

    def test_expiry_date_unusable(self, base_order, context):
        """Expiry is either an impossible month or a year long past."""
        for _ in range(200):
            expiry = invalid_expiry_date(base_order, context).credit_card_expiry
            month, year = expiry.split("/")
            assert len(month) == 2 and len(year) == 2
            assert 1 <= int(month) <= 19
            assert 2 <= int(year) <= 18


class TestTotalRule:
    """Test the wrong total rule."""

    def test_total_always_differs(self, base_order, context):
        """The delta is never zero."""
        correct = order_total(base_order.pizzas_in_order)
        for _ in range(500):
            corrupted = invalid_total(base_order, context)
            delta = corrupted.price_total_in_pence - correct
            assert delta != 0
            assert -100 <= delta <= 999
            assert corrupted.pizzas_in_order == base_order.pizzas_in_order


class TestPizzaRules:
    """Test the rules that change the pizzas."""

    def test_undefined_pizza_appended(self, base_order, context, restaurants):
        """One pizza no restaurant sells is added and priced in."""
        corrupted = undefined_pizza(base_order, context)

        assert len(corrupted.pizzas_in_order) == len(base_order.pizzas_in_order) + 1
        surprise = corrupted.pizzas_in_order[-1]
        assert surprise.name == UNDEFINED_PIZZA_NAME
        assert not any(r.sells(surprise.name) for r in restaurants)
        assert corrupted.price_total_in_pence == order_total(corrupted.pizzas_in_order)

    def test_too_many_pizzas(self, base_order, context):
        """Four extra pizzas push the order over the limit, total recomputed."""
        corrupted = too_many_pizzas(base_order, context)

        assert len(corrupted.pizzas_in_order) == len(base_order.pizzas_in_order) + 4
        assert len(corrupted.pizzas_in_order) > MAX_PIZZAS_PER_ORDER
        assert corrupted.price_total_in_pence == order_total(corrupted.pizzas_in_order)
        # Only repeats of pizzas already in the order
        names = {p.name for p in base_order.pizzas_in_order}
        assert {p.name for p in corrupted.pizzas_in_order} == names

    def test_multiple_restaurants_from_first(self, base_order, context, restaurants):
        """An order from restaurant 0 gains restaurant 1's first pizza."""
        corrupted = multiple_restaurants(base_order, context)

        assert corrupted.pizzas_in_order[-1] == restaurants[1].menu[0]
        assert corrupted.price_total_in_pence == order_total(corrupted.pizzas_in_order)

    def test_multiple_restaurants_from_second(self, order_generator, context, restaurants):
        """An order from any other restaurant gains restaurant 0's first pizza."""
        order_generator.make_base_order(MONDAY)
        second = order_generator.make_base_order(MONDAY)
        assert second.pizzas_in_order[0] == restaurants[1].menu[0]

        corrupted = multiple_restaurants(second, context)

        assert corrupted.pizzas_in_order[-1] == restaurants[0].menu[0]
        owners = {
            r.name for r in restaurants
            for p in corrupted.pizzas_in_order if r.sells(p.name)
        }
        assert len(owners) == 2

    @pytest.mark.parametrize(
        "order_date, closed_restaurant",
        [
            (MONDAY, "Slice Two"),
            (FRIDAY, "Pizzeria Uno"),
        ],
    )
    def test_restaurant_closed(self, order_generator, context, order_date, closed_restaurant):
        """The only pizza comes from a restaurant closed that day."""
        base = order_generator.make_base_order(order_date)

        corrupted = restaurant_closed(base, context)

        assert len(corrupted.pizzas_in_order) == 1
        owner = next(r for r in context.restaurants if r.sells(corrupted.pizzas_in_order[0].name))
        assert owner.name == closed_restaurant
        assert not owner.is_open_on(order_date)
        assert corrupted.price_total_in_pence == order_total(corrupted.pizzas_in_order)

    def test_restaurant_closed_without_candidate(self, base_order, restaurants):
        """No restaurant closed that day is fatal."""
        always_open = [
            Restaurant(
                name=r.name,
                location=r.location,
                opening_days=list(DayOfWeek),
                menu=r.menu,
            )
            for r in restaurants
        ]
        ctx = CorruptionContext(random=random.Random(1), restaurants=always_open)

        with pytest.raises(ReferenceDataError, match="MONDAY"):
            restaurant_closed(base_order, ctx)

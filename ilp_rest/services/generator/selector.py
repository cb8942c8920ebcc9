"""Round-robin restaurant selection."""
from typing import List, Sequence

from ilp_rest.services.reference.models import Restaurant


class RestaurantSelector:
    """Hands out restaurants in list order, wrapping around at the end."""

    def __init__(self, restaurants: Sequence[Restaurant]):
        if not restaurants:
            raise ValueError("RestaurantSelector needs at least one restaurant")
        self._restaurants: List[Restaurant] = list(restaurants)
        self._index = 0

    @property
    def restaurants(self) -> List[Restaurant]:
        return self._restaurants

    def next(self) -> Restaurant:
        """Return the current restaurant and advance the cursor."""
        restaurant = self._restaurants[self._index]
        self._index = (self._index + 1) % len(self._restaurants)
        return restaurant

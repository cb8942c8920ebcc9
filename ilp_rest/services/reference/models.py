"""Reference data models: restaurants, their menus and the drone regions."""
from datetime import date
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DayOfWeek(str, Enum):
    """Days a restaurant can be open on."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, day: date) -> "DayOfWeek":
        """Return the weekday a calendar date falls on."""
        return list(cls)[day.weekday()]

    def __str__(self) -> str:
        return self.value


class IlpModel(BaseModel):
    """Base model using the camelCase field names of the ILP JSON files."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Pizza(IlpModel):
    """A menu item, priced in pence."""

    name: str
    price_in_pence: int = Field(..., ge=0)


class LngLat(IlpModel):
    """A WGS84 position."""

    lng: float
    lat: float


class Restaurant(IlpModel):
    """A restaurant taking part in the delivery service."""

    name: str
    location: LngLat
    opening_days: List[DayOfWeek]
    menu: List[Pizza]

    def is_open_on(self, day: date) -> bool:
        """Check whether the restaurant opens on the weekday of a date."""
        return DayOfWeek.of(day) in self.opening_days

    def sells(self, pizza_name: str) -> bool:
        """Check whether a pizza with this name is on the menu."""
        return any(pizza.name == pizza_name for pizza in self.menu)


class NamedRegion(IlpModel):
    """A named polygon, e.g. the central area or a no-fly zone."""

    name: str
    vertices: List[LngLat]

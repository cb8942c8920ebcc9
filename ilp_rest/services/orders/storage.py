"""JSON (de)serialization of order fixture files."""
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter

from ilp_rest.services.orders.models import Order

_orders_adapter = TypeAdapter(List[Order])


def write_orders(orders: List[Order], path: Union[str, Path]) -> Path:
    """Write orders as one pretty-printed JSON array with ISO dates."""
    path = Path(path)
    payload = _orders_adapter.dump_json(orders, by_alias=True, indent=2)
    path.write_bytes(payload)
    return path


def read_orders(path: Union[str, Path]) -> List[Order]:
    """Parse an order fixture file."""
    return _orders_adapter.validate_json(Path(path).read_bytes())

"""FastAPI dependencies."""
from ilp_rest.core.config import settings
from ilp_rest.services.orders.repository import OrderRepository
from ilp_rest.services.reference.repository import ReferenceDataRepository


def get_reference_repository() -> ReferenceDataRepository:
    """Get reference data repository instance."""
    return ReferenceDataRepository(data_dir=settings.data_dir)


def get_order_repository() -> OrderRepository:
    """Get order repository instance."""
    return OrderRepository(orders_file=settings.orders_file)

"""Sample order API endpoints."""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ilp_rest.core.dependencies import get_order_repository
from ilp_rest.services.orders.models import Order, OrderStatus, PublicOrder
from ilp_rest.services.orders.repository import OrderRepository


router = APIRouter()
logger = logging.getLogger(__name__)


async def _load_orders(repository: OrderRepository, order_date: Optional[date]) -> List[Order]:
    try:
        orders = await repository.get_orders(order_date)
    except Exception as e:
        logger.error(
            f"[ORDERS] Error loading orders - date: {order_date}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading orders: {str(e)}")

    logger.info(f"[ORDERS] Found {len(orders)} orders - date: {order_date or 'all'}")
    return orders


async def _find_order(repository: OrderRepository, order_no: str) -> Order:
    try:
        order = await repository.get_order(order_no)
    except Exception as e:
        logger.error(
            f"[ORDERS] Error looking up order - orderNo: {order_no}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading orders: {str(e)}")

    if order is None:
        logger.info(f"[ORDERS] Order not found - orderNo: {order_no}")
        raise HTTPException(status_code=404, detail="order not found")
    return order


@router.get("/orders", response_model=List[PublicOrder])
@router.get("/orders/{order_date}", response_model=List[PublicOrder])
async def get_orders(
    order_date: Optional[date] = None,
    repository: OrderRepository = Depends(get_order_repository),
):
    """
    Sample orders (some of them invalid) without their expected outcome.

    Optionally restricted to orders placed on order_date (YYYY-MM-DD).
    """
    orders = await _load_orders(repository, order_date)
    return [order.to_public() for order in orders]


@router.get("/ordersWithOutcome", response_model=List[Order])
@router.get("/ordersWithOutcome/{order_date}", response_model=List[Order])
async def get_orders_with_outcome(
    order_date: Optional[date] = None,
    repository: OrderRepository = Depends(get_order_repository),
):
    """Sample orders including status and invalid-order reason code."""
    return await _load_orders(repository, order_date)


@router.get("/orders/{order_no}/details", response_model=Order)
async def get_order_details(
    order_no: str,
    repository: OrderRepository = Depends(get_order_repository),
):
    """Get the details for an order, 404 if it does not exist."""
    return await _find_order(repository, order_no)


@router.get("/orders/{order_no}/isOrderOutcomeValid/{status_to_check}", response_model=bool)
async def is_order_outcome_valid(
    order_no: str,
    status_to_check: OrderStatus,
    repository: OrderRepository = Depends(get_order_repository),
):
    """Check an order's status against the expected one; False for unknown orders."""
    try:
        return await repository.has_status(order_no, status_to_check)
    except Exception as e:
        logger.error(
            f"[ORDERS] Error checking order outcome - orderNo: {order_no}, "
            f"status: {status_to_check}, Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading orders: {str(e)}")


@router.get("/orders/{order_no}/status", response_model=OrderStatus)
async def get_order_status(
    order_no: str,
    repository: OrderRepository = Depends(get_order_repository),
):
    """Get the status of an order, 404 if it does not exist."""
    order = await _find_order(repository, order_no)
    return order.order_status

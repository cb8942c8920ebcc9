"""Health check and echo endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()
logger = logging.getLogger(__name__)


class TestItem(BaseModel):
    """Echo response model."""

    greeting: str


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {"status": "healthy"}


@router.get("/isAlive", response_model=bool)
async def is_alive():
    """Simple alive check, always true."""
    return True


@router.get("/test", response_model=TestItem)
@router.get("/test/{input}", response_model=TestItem)
async def test(input: Optional[str] = None):
    """Echo the provided value to test the service's availability."""
    value = input if input is not None else "not provided"
    return TestItem(greeting=f"Hello from the ILP-REST-Service. Your provided value was: {value}")

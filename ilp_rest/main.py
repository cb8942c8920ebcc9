"""Main FastAPI application."""
from contextlib import asynccontextmanager
from datetime import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ilp_rest.core.config import settings
from ilp_rest.core.logging import setup_logging
from ilp_rest.api import health, orders, reference


logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    logger.info(f"[STARTUP] Serving reference data from {settings.data_dir}")
    logger.info(f"[STARTUP] Serving orders from {settings.orders_file}")
    yield


app = FastAPI(
    title="ILP REST Service",
    description="Sample restaurants, orders and drone regions for the ILP coursework",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(orders.router, tags=["orders"])
app.include_router(reference.router, tags=["reference"])


def render_error_page(status_code: int, message: str, url: str) -> HTMLResponse:
    """Project specific HTML page for server errors."""
    timestamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
    body = (
        "<html><body><h1>ILP-REST-Server - Error Page</h1>"
        f"<div>Status code: <b>{status_code}</b></div>"
        f"<div>Exception Message: <b>{message}</b></div>"
        f"<div>Original URL: <b>{url}</b></div>"
        f"<br/><div>Timestamp: <b>{timestamp}</b></div>"
        "</body></html>"
    )
    return HTMLResponse(content=body, status_code=status_code)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Server errors get the HTML error page, client errors keep the JSON body."""
    if exc.status_code < 500:
        return await http_exception_handler(request, exc)
    return render_error_page(exc.status_code, str(exc.detail), str(request.url))


@app.exception_handler(Exception)
async def handle_unexpected_exception(request: Request, exc: Exception):
    """Catch-all for errors no endpoint converted."""
    logger.error(
        f"[ERROR] Unhandled error - URL: {request.url}, Error: {type(exc).__name__}: {str(exc)}",
        exc_info=exc,
    )
    return render_error_page(500, str(exc) or "N/A", str(request.url))


@app.get("/")
async def root():
    """Service information."""
    return {
        "message": "ILP REST Service",
        "version": VERSION,
        "endpoints": [
            "/restaurants",
            "/orders",
            "/ordersWithOutcome",
            "/centralArea",
            "/noFlyZones",
            "/isAlive",
        ],
    }


@app.get("/about")
async def about():
    """What this service is for."""
    return {
        "name": "ILP REST Service",
        "version": VERSION,
        "description": (
            "Static sample data for the Informatics Large Practical: restaurants, "
            "delivery orders (valid and deliberately invalid), no-fly zones and the "
            "central area."
        ),
    }

"""Shared test fixtures and configuration."""
import pytest
from datetime import date
from pathlib import Path
from fastapi.testclient import TestClient

from ilp_rest.main import app
from ilp_rest.core.dependencies import get_order_repository, get_reference_repository
from ilp_rest.services.generator.generator import OrderGenerator
from ilp_rest.services.generator.selector import RestaurantSelector
from ilp_rest.services.orders.repository import OrderRepository
from ilp_rest.services.reference.repository import ReferenceDataRepository


FIXTURES_DIR = Path(__file__).parent / "fixtures"

# 2023-09-01 is a Friday
START_DATE = date(2023, 9, 1)


@pytest.fixture
def fixtures_dir():
    """Return path to the test reference data directory."""
    return FIXTURES_DIR


@pytest.fixture
def reference_repository(fixtures_dir):
    """Reference repository over the two test restaurants."""
    return ReferenceDataRepository(data_dir=fixtures_dir)


@pytest.fixture
def restaurants(reference_repository):
    """The two test restaurants, each with a single pizza."""
    return reference_repository.load_restaurants()


@pytest.fixture
def order_repository(fixtures_dir):
    """Order repository over the four test orders."""
    return OrderRepository(orders_file=fixtures_dir / "orders.json")


@pytest.fixture
def order_generator(restaurants):
    """Seeded generator over the test restaurants."""
    return OrderGenerator(RestaurantSelector(restaurants), seed=1234)


@pytest.fixture
def generated_orders(order_generator):
    """One week of orders, three valid orders per day."""
    return order_generator.generate(
        start_date=START_DATE,
        duration_days=7,
        valid_orders_per_day=3,
    )


@pytest.fixture
def test_client(reference_repository, order_repository):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_reference_repository] = lambda: reference_repository
    app.dependency_overrides[get_order_repository] = lambda: order_repository

    client = TestClient(app, raise_server_exceptions=False)

    yield client

    app.dependency_overrides.clear()

"""Command line entry point for the sample order generator.

Usage:
    ilp-generate-orders [START_DATE]

START_DATE is an ISO date (YYYY-MM-DD) and overrides ILP_GENERATOR_START_DATE.
"""
import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from ilp_rest.core.config import settings
from ilp_rest.core.logging import setup_logging
from ilp_rest.services.generator.generator import OrderGenerator
from ilp_rest.services.generator.selector import RestaurantSelector
from ilp_rest.services.generator.validation import ReferenceDataError, validate_reference_data
from ilp_rest.services.orders.storage import write_orders
from ilp_rest.services.reference.repository import ReferenceDataRepository

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ilp-generate-orders",
        description="Generate the ILP sample order fixture (JSON).",
    )
    parser.add_argument(
        "start_date",
        nargs="?",
        type=date.fromisoformat,
        default=None,
        help="first order date, YYYY-MM-DD",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Generate orders and write them to the configured output file."""
    args = _parse_args(argv)
    setup_logging()
    logger.info("ILP sample order data generator")

    start_date = args.start_date or settings.generator_start_date
    repository = ReferenceDataRepository(data_dir=settings.data_dir)
    restaurants = repository.load_restaurants()
    logger.info(f"[GENERATOR] Loaded {len(restaurants)} restaurants from {repository.data_dir}")

    try:
        validate_reference_data(restaurants)
        generator = OrderGenerator(RestaurantSelector(restaurants), seed=settings.generator_seed)
        orders = generator.generate(
            start_date=start_date,
            duration_days=settings.generator_duration_days,
            valid_orders_per_day=settings.generator_valid_orders_per_day,
        )
    except ReferenceDataError as e:
        logger.error(f"[GENERATOR] Reference data unusable, nothing written - {e}")
        return 1

    path = write_orders(orders, settings.generator_output)
    logger.info(f"[GENERATOR] Wrote {len(orders)} orders to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

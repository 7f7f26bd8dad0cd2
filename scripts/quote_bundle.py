#!/usr/bin/env python3
"""
Bundle Quote Script.

Prices a selection of services for a service year and prints the base
price, the final price and the bundle discount that was applied.

Usage:
    python -m scripts.quote_bundle --year 2021 Photography VideoRecording
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from app.domain.exceptions import ConfigurationError
from app.domain.value_objects import PriceQuote, ServiceType, ServiceYear
from app.pricing import calculate_price

# Configure logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def format_quote(quote: PriceQuote) -> str:
    lines = [
        f"Base price:  {quote.base_price}",
        f"Final price: {quote.final_price}",
    ]
    if quote.applied_discount is not None:
        lines.append(
            f"Discount:    {quote.applied_discount.name} (-{quote.applied_discount.discount_value})"
        )
    else:
        lines.append("Discount:    none")
    return "\n".join(lines)


def main(services: List[str], year: int) -> Optional[PriceQuote]:
    """
    Main entry point for the quote script.

    Args:
        services: Service names (e.g., 'Photography', 'VideoRecording')
        year: Service year

    Returns:
        The computed quote, or None if the input could not be priced
    """
    logger.info(f"Pricing {len(services)} service(s) for {year}: {', '.join(services) or '-'}")

    try:
        quote = calculate_price(services, year)
    except (ValueError, ConfigurationError) as e:
        logger.error(f"Pricing failed: {e}")
        return None

    print(format_quote(quote))
    return quote


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Price a photography/video bundle")
    parser.add_argument(
        "services",
        nargs="*",
        help=f"Services to include ({', '.join(s.value for s in ServiceType)})"
    )
    parser.add_argument(
        "--year", "-y",
        type=int,
        default=int(max(ServiceYear)),
        help="Service year (default: latest published year)"
    )

    args = parser.parse_args()
    if main(args.services, args.year) is None:
        sys.exit(1)

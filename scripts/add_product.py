#!/usr/bin/env python3
"""
Add one product through the products API and print the stored record.

Examples:
  python scripts/add_product.py
  python scripts/add_product.py --title "Desk Lamp" --price 2500 --category lighting
  python scripts/add_product.py --config config/client.yml --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from dummyjson.integrations.clients.real_http.products import RealProductsClient
from dummyjson.integrations.contracts.interfaces import Product
from dummyjson.integrations.errors import ProductSubmissionError
from dummyjson.utils.config_loader import build_http_client, load_client_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add a product through the products API")
    parser.add_argument("--url", help="Create-product endpoint (overrides config and PRODUCT_API_URL)")
    parser.add_argument("--config", type=Path, help="YAML file with api_url / timeout_seconds")
    parser.add_argument("--title", default="BMW Pencil 11")
    parser.add_argument("--description", default="A luxury pencil by BMW 12")
    parser.add_argument("--price", type=int, default=1213)
    parser.add_argument("--brand", default="BMW 14")
    parser.add_argument("--category", default="stationery 15")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    cfg = load_client_config(args.config)
    api_url = args.url or cfg.api_url

    product = Product(
        title=args.title,
        description=args.description,
        price=args.price,
        brand=args.brand,
        category=args.category,
    )

    with build_http_client(cfg) as http_client:
        client = RealProductsClient(api_url, http_client)
        try:
            added = client.add_product(product)
        except ProductSubmissionError as e:
            print(f"Failed to add product: {e}")
            return 1

    print(f"Product added successfully: {added}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Command-line access to the Catalog API:
- list products (table or JSON)
- add a product

Reads the same configuration as the web app (config/catalog_config.yml,
CATALOG_* environment variables, .env).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent))

from pyapi_catalog.integrations.clients.real_http.catalog_api import CatalogAPIClient
from pyapi_catalog.integrations.contracts.products import ProductInput
from pyapi_catalog.utils.config_loader import describe_config_error, load_catalog_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List or add products on the Catalog API")
    parser.add_argument("--config", type=Path, default=None, help="Path to catalog_config.yml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List products")
    list_cmd.add_argument("--limit", type=int, default=0, help="Show at most N products (0 = all)")
    list_cmd.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    add_cmd = sub.add_parser("add", help="Add a product")
    add_cmd.add_argument("--name", required=True)
    add_cmd.add_argument("--price", type=float, required=True, help="Price in EUR")
    add_cmd.add_argument("--slug", default="")
    add_cmd.add_argument("--description", default="")
    add_cmd.add_argument("--image", default="")
    add_cmd.add_argument("--category", default="")
    add_cmd.add_argument("--out-of-stock", action="store_true")
    add_cmd.add_argument("--rating", type=float, default=0.0)
    return parser


def run_list(client: CatalogAPIClient, limit: int, as_json: bool) -> int:
    result = client.list_products()
    if not result.ok:
        print(f"Error fetching products: {result.error.message}", file=sys.stderr)
        return 1

    products = result.value[:limit] if limit > 0 else result.value
    if as_json:
        print(json.dumps({"products": [p.to_payload() for p in products]}, indent=2))
        return 0

    if not products:
        print("No products available at the moment.")
        return 0
    for p in products:
        stock = "in stock" if p.in_stock else "out of stock"
        print(f"{p.id:>6}  {p.name:<40}  {p.price_eur:>10,.2f} EUR  {p.rating:.1f}  {stock}")
    return 0


def run_add(client: CatalogAPIClient, args: argparse.Namespace) -> int:
    product_input = ProductInput(
        name=args.name,
        price_eur=args.price,
        slug=args.slug,
        description=args.description,
        image=args.image,
        category=args.category,
        in_stock=not args.out_of_stock,
        rating=args.rating,
    )
    result = client.add_product(product_input)
    if not result.ok:
        print(f"API error: {result.error.message}", file=sys.stderr)
        return 1
    print(f"Product added successfully! ID: {result.value.product_id}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_catalog_config(args.config)
    except ValidationError as e:
        print(f"Configuration error: {describe_config_error(e)}", file=sys.stderr)
        return 1

    client = CatalogAPIClient(config)
    if args.command == "list":
        return run_list(client, args.limit, args.json)
    return run_add(client, args)


if __name__ == "__main__":
    sys.exit(main())

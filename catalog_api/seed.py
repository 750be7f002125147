"""Seed product catalog command.

Loads the sample catalog into the configured MongoDB collection.

Usage:
    catalog-seed
    catalog-seed --no-clear
"""

import argparse
import asyncio
from typing import Any

from catalog_api.catalog.repository import MongoProductRepository, ProductRepository
from catalog_api.catalog.service import CatalogService
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import StoreConnection


async def seed(repository: ProductRepository, clear: bool = True) -> dict[str, Any]:
    """Seed the sample catalog into a repository.

    Args:
        repository: Target product store.
        clear: Whether to clear existing products first.

    Returns:
        Seeding result.
    """
    service = CatalogService(repository)
    return await service.seed_catalog(clear_existing=clear)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with the sample products",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing products; skip seeding if any exist",
    )
    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    connection = StoreConnection(
        uri=settings.mongodb_uri,
        database_name=settings.database_name,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    repository = MongoProductRepository(connection, settings.collection_name)

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Database: {settings.database_name}.{settings.collection_name}")
    print(f"Clear existing: {not args.no_clear}")
    print()

    try:
        result = await seed(repository, clear=not args.no_clear)
    finally:
        await connection.close()

    print(f"  Deleted: {result['deleted']} existing products")
    print(f"  Created: {result['products_created']} products")
    print(f"  Variants: {result['variants_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()

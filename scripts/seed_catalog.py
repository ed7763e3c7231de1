#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and loads the sample catalog
(categories, products PROD001..PROD008 and their variants).

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
    DATABASE_URL=sqlite+aiosqlite:///catalog.db python scripts/seed_catalog.py
"""

import argparse
import asyncio

from app.catalog.seed import seed_catalog
from app.infrastructure.database import async_session_factory, create_tables, engine


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the sample product catalog",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing catalog rows before seeding",
    )
    parser.add_argument(
        "--skip-create",
        action="store_true",
        help="Don't create tables (use when migrations manage the schema)",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    if not args.skip_create:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    print("Seeding sample catalog...")
    try:
        async with async_session_factory() as session:
            result = await seed_catalog(session, clear_existing=not args.no_clear)
    except Exception as e:
        print(f"  ✗ Error: {e}")
        raise
    finally:
        await engine.dispose()

    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Variants: {result['variants_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())

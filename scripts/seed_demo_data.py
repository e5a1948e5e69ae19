#!/usr/bin/env python3
"""Seed demo data script.

Creates the product management tables and inserts demo locales,
attributes with translated values and one product abstract.

Usage:
    python scripts/seed_demo_data.py
    python scripts/seed_demo_data.py --drop
"""

import argparse
import asyncio

# Registers all models on Base.metadata
import product_management.attribute.models  # noqa: F401
import product_management.product.models  # noqa: F401
from product_management.infrastructure.database import Base, async_session_factory, engine
from product_management.infrastructure.seed import seed_demo_data


async def create_tables(drop: bool = False) -> None:
    """Create database tables, optionally dropping them first."""
    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed product management demo data")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before seeding",
    )
    args = parser.parse_args()

    print("Creating database tables...")
    await create_tables(drop=args.drop)

    async with async_session_factory() as session:
        counts = await seed_demo_data(session)
        await session.commit()

    for name, count in counts.items():
        print(f"  ✓ {name}: {count}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())

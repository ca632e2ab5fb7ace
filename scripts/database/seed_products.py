#!/usr/bin/env python3
"""
Seed the demo product catalogue.

Creates the tables if needed and fills the catalogue with a deterministic set
of generated products, so paging through it gives the same pages every time.

Requires a file-backed DATABASE_URL (for example sqlite:///products.db);
an in-memory database would be discarded when the script exits.

Usage:
    python scripts/database/seed_products.py [--count 500] [--seed 42] [--reset] [--database-url URL]
"""

import sys
import logging
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv(project_root / '.env')

from config import DATABASE_URL, SEED_PRODUCT_COUNT, SEED_RANDOM_SEED
from db.database import configure_engine, create_tables, is_memory_database
from db.services.product_service import ProductService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description='Seed the demo product catalogue'
    )
    parser.add_argument(
        '--count',
        type=int,
        default=SEED_PRODUCT_COUNT,
        help='Number of products to create'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=SEED_RANDOM_SEED,
        help='Random seed for generated product data'
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Delete existing products before seeding'
    )
    parser.add_argument(
        '--database-url',
        default=DATABASE_URL,
        help='Database to seed (defaults to DATABASE_URL)'
    )

    args = parser.parse_args(argv)

    if is_memory_database(args.database_url):
        logger.error(f"❌ Refusing to seed in-memory database {args.database_url}; set DATABASE_URL to a file-backed database")
        return 2

    try:
        configure_engine(args.database_url)
        create_tables()
        inserted = ProductService().seed_products(args.count, seed=args.seed, reset=args.reset)
        logger.info(f"✅ Seeding complete ({inserted} products added)")
        return 0
    except Exception as e:
        logger.error(f"❌ Seeding failed: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())

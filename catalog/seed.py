"""
Catalog API - Database Seeding
==============================

What:  Resets the products table and inserts sample products.
How:   Creates missing tables, deletes every product, then creates each
       record through ProductService so validation and uniqueness apply.
When:  Local development only; refuses to run when ENVIRONMENT=production.

Usage:
    python -m catalog.seed                      # bundled catalog/data/products.json
    python -m catalog.seed path/to/products.json
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from catalog.config import settings
from catalog.database import create_tables, dispose_engine
from catalog.exceptions import CatalogError
from catalog.repositories.product_repository import ProductRepository
from catalog.schemas.product import ProductCreate
from catalog.services.product_service import ProductService

logger = logging.getLogger("catalog.seed")

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "products.json"


async def seed(data_path: Path = DEFAULT_DATA_PATH, service: Optional[ProductService] = None) -> int:
    """
    Replace all products with the records in `data_path`.

    Returns:
        Number of products inserted

    Raises:
        RuntimeError: when running against a production configuration
        CatalogError: when a record is invalid or duplicates a name
    """
    if settings.is_production:
        raise RuntimeError("Refusing to seed a production database")

    records = json.loads(data_path.read_text(encoding="utf-8"))
    repository = ProductRepository()
    service = service or ProductService(repository=repository)

    await create_tables()
    removed = await repository.delete_all()
    logger.info("Removed %d existing products", removed)

    for record in records:
        await service.create(ProductCreate(**record))
    logger.info("Inserted %d products from %s", len(records), data_path)
    return len(records)


async def _main(argv: list) -> int:
    data_path = Path(argv[1]) if len(argv) > 1 else DEFAULT_DATA_PATH
    try:
        await seed(data_path)
    except CatalogError as e:
        logger.error("Seeding failed: %s (check for duplicate names)", e.message)
        return 1
    except RuntimeError as e:
        logger.error("%s", e)
        return 1
    finally:
        await dispose_engine()
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(_main(sys.argv)))

"""
Catalog API - Seed Script Tests
===============================

What we test:
    ✅ Bundled sample data loads and replaces existing rows
    ✅ Seeding refuses to run against production
"""

import json

import pytest

from catalog.config import settings
from catalog.seed import DEFAULT_DATA_PATH, seed
from catalog.services.product_service import ProductService


class TestSeed:

    @pytest.mark.asyncio
    async def test_loads_bundled_products(self, database):
        expected = json.loads(DEFAULT_DATA_PATH.read_text(encoding="utf-8"))

        inserted = await seed()

        assert inserted == len(expected)
        products = await ProductService().list()
        assert sorted(p.name for p in products) == sorted(r["name"] for r in expected)

    @pytest.mark.asyncio
    async def test_reseeding_replaces_rows(self, database, tmp_path):
        data = tmp_path / "products.json"
        data.write_text(json.dumps([{"name": "Lamp", "price": 12.0, "stock": 4}]))

        await seed()
        await seed(data)

        products = await ProductService().list()
        assert [p.name for p in products] == ["Lamp"]

    @pytest.mark.asyncio
    async def test_refuses_production(self, monkeypatch):
        monkeypatch.setattr(settings, "environment", "production")

        with pytest.raises(RuntimeError, match="production"):
            await seed()

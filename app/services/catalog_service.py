"""
Roster API - Catalog Service
=============================

What:  Read-only listings of food items and orders.
How:   One SELECT each through the QueryExecutor; no validation step.
Note:  Orders are an opaque row set: whatever columns the `orders` table
       has are returned as-is.
"""

from typing import Union

from sqlalchemy import select, text

from app.errors import DataAccessError
from app.models.catalog import FoodItem
from app.services.query_executor import QueryExecutor, QueryResult


class CatalogService:

    async def list_foods(self, executor: QueryExecutor) -> Union[QueryResult, DataAccessError]:
        return await executor.execute(select(FoodItem.__table__))

    async def list_orders(self, executor: QueryExecutor) -> Union[QueryResult, DataAccessError]:
        return await executor.execute(text("SELECT * FROM orders"))


catalog_service = CatalogService()

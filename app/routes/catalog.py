"""
Roster API - Catalog Route Handlers
====================================

What:  GET /api/foods and GET /api/orders, read-only listings.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.responses import rows_response
from app.schemas.student import ErrorResponse, FoodItemRecord
from app.services.catalog_service import catalog_service
from app.services.query_executor import QueryExecutor, get_query_executor

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get(
    "/foods",
    response_model=List[FoodItemRecord],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Retrieve all food items",
)
async def list_foods(
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    return rows_response(await catalog_service.list_foods(executor))


@router.get(
    "/orders",
    response_model=List[Dict[str, Any]],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Retrieve all orders",
    description="Returns every row of the orders table with its columns as stored.",
)
async def list_orders(
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    return rows_response(await catalog_service.list_orders(executor))

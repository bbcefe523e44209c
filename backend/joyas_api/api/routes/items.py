"""Inventory Routes — paginated listing and attribute filtering of the inventario table.

Invariants:
    - GET /items defaults: limit=10, page=1, order_by="precio_ASC"
    - Invalid order_by → 400 before any SQL runs
    - Execution failures surface as fixed-message 500s (raised by the service)
    - GET /items/filters returns a bare array, no envelope, no pagination

Design Decisions:
    - Thin routes: parse query → call service → shape response
    - Links rebuilt from the request's own scheme, host and path so they stay
      correct behind any mount point
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from joyas_api.core.inventory_queries import (
    DEFAULT_PRECIO_MAX, DEFAULT_PRECIO_MIN, FilterCriteria,
)
from joyas_api.core.ordering import DEFAULT_ORDER_BY, parse_order_by
from joyas_api.core.pagination import build_page_links, compute_offset
from joyas_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from joyas_api.models.inventory_item import SORTABLE_FIELDS
from joyas_api.schemas.inventory import InventoryPage
from joyas_api.services.inventory import filter_inventory, list_inventory

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=InventoryPage)
async def list_items(
    request: Request,
    limit: int = Query(10, gt=0),
    page: int = Query(1, ge=1),
    order_by: str = Query(DEFAULT_ORDER_BY),
    db: DatabaseSessionManager = Depends(get_db_manager),
):
    """List inventory rows with pagination, ordering and HATEOAS links."""
    ordering = parse_order_by(order_by, SORTABLE_FIELDS)
    rows = await list_inventory(
        db, ordering, limit, compute_offset(page, limit),
    )
    base_url = f"{request.url.scheme}://{request.url.netloc}{request.url.path}"
    links = build_page_links(base_url, page, limit, order_by)
    logger.debug("Enlaces HATEOAS: %s", links)
    return InventoryPage(data=rows, links=links)


@router.get("/filters", response_model=list[dict[str, Any]])
async def filter_items(
    precio_min: float = Query(DEFAULT_PRECIO_MIN),
    precio_max: float = Query(DEFAULT_PRECIO_MAX),
    categoria: str | None = Query(None),
    metal: str | None = Query(None),
    db: DatabaseSessionManager = Depends(get_db_manager),
):
    """Filter inventory rows by price range and optional categoria/metal."""
    criteria = FilterCriteria(
        precio_min=precio_min, precio_max=precio_max,
        categoria=categoria, metal=metal,
    )
    return await filter_inventory(db, criteria)

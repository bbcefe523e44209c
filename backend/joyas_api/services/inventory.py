"""Inventory Service — builds, executes and shapes the inventory read queries.

Invariants:
    - One statement per call, executed on the injected DatabaseSessionManager
    - Any execution failure becomes the endpoint's fixed-message error;
      the cause is logged here and never returned to the client
    - SQL text and parameters are logged at DEBUG before execution

Design Decisions:
    - Impureim sandwich: pure builders in core/, IO here, routes stay thin
"""

import logging
from typing import Any

from joyas_api.core.errors import InventoryFilterError, InventoryListError
from joyas_api.core.inventory_queries import (
    FilterCriteria, build_filter_query, build_list_query,
)
from joyas_api.core.ordering import Ordering
from joyas_api.infrastructure.database import DatabaseSessionManager
from joyas_api.models.inventory_item import INVENTORY_TABLE

logger = logging.getLogger(__name__)


async def list_inventory(
    db: DatabaseSessionManager, ordering: Ordering, limit: int, offset: int,
) -> list[dict[str, Any]]:
    """Return one ordered page of inventory rows."""
    query = build_list_query(INVENTORY_TABLE, ordering, limit, offset)
    logger.debug("Consulta SQL: %s | Parámetros: %s", query.sql, query.params)
    try:
        rows = await db.fetch_all(query.sql, query.bound_params())
    except Exception as e:
        logger.error(f"Error al obtener las joyas: {e}", exc_info=True)
        raise InventoryListError() from e
    logger.debug("Datos enviados en la respuesta: %d filas", len(rows))
    return rows


async def filter_inventory(
    db: DatabaseSessionManager, criteria: FilterCriteria,
) -> list[dict[str, Any]]:
    """Return every inventory row matching the price range and attributes."""
    query = build_filter_query(INVENTORY_TABLE, criteria)
    logger.debug("Consulta SQL: %s | Parámetros: %s", query.sql, query.params)
    try:
        return await db.fetch_all(query.sql, query.bound_params())
    except Exception as e:
        logger.error(f"Error al filtrar joyas: {e}", exc_info=True)
        raise InventoryFilterError() from e

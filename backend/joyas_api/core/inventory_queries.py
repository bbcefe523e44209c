"""Inventory Queries — SQL text and bound parameters for the read endpoints.

Invariants:
    - Filter values are always bound, never interpolated
    - Filter parameter order: precio_min, precio_max, [categoria], [metal]
    - Placeholders are numbered contiguously (:p1, :p2, ...) in parameter order
    - Only a validated Ordering and the table name are interpolated
    - Price bounds are cast to NUMERIC so fractional values compare against
      integer or decimal precio columns alike

Design Decisions:
    - Positional parameters kept as a list, converted to named binds only at
      execution time: the list order is what callers and tests reason about
"""

from dataclasses import dataclass, field

from joyas_api.core.ordering import Ordering

DEFAULT_PRECIO_MIN = 0
DEFAULT_PRECIO_MAX = 999999


@dataclass(frozen=True)
class FilterCriteria:
    """Query-string filters for GET /items/filters."""
    precio_min: float = DEFAULT_PRECIO_MIN
    precio_max: float = DEFAULT_PRECIO_MAX
    categoria: str | None = None
    metal: str | None = None


@dataclass
class InventoryQuery:
    """SQL statement plus its positional parameters."""
    sql: str
    params: list = field(default_factory=list)

    def bind(self, value) -> str:
        """Append a parameter and return its placeholder."""
        self.params.append(value)
        return f":p{len(self.params)}"

    def bound_params(self) -> dict:
        return {f"p{i}": v for i, v in enumerate(self.params, start=1)}


def build_list_query(
    table: str, ordering: Ordering, limit: int, offset: int,
) -> InventoryQuery:
    query = InventoryQuery(sql="")
    limit_ph = query.bind(limit)
    offset_ph = query.bind(offset)
    query.sql = (
        f"SELECT * FROM {table} "
        f"ORDER BY {ordering.to_sql()} "
        f"LIMIT {limit_ph} OFFSET {offset_ph}"
    )
    return query


def build_filter_query(table: str, criteria: FilterCriteria) -> InventoryQuery:
    query = InventoryQuery(sql="")
    clauses = [
        f"precio >= CAST({query.bind(criteria.precio_min)} AS NUMERIC)",
        f"precio <= CAST({query.bind(criteria.precio_max)} AS NUMERIC)",
    ]
    if criteria.categoria:
        clauses.append(f"categoria = {query.bind(criteria.categoria)}")
    if criteria.metal:
        clauses.append(f"metal = {query.bind(criteria.metal)}")
    query.sql = f"SELECT * FROM {table} WHERE " + " AND ".join(clauses)
    return query

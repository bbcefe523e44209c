"""Ordering — parse and validate the order_by query parameter.

Invariants:
    - order_by is split on its LAST underscore: "<field>_<direction>"
    - Field must be in the caller-supplied allow-list; direction ASC or DESC
    - Anything else raises InvalidOrderingError (never reaches SQL text)

Design Decisions:
    - Allow-list instead of direct interpolation: identifiers and keywords cannot
      be bound as parameters, so validation is the only safe gate
    - Pure function, no IO: the allow-list is passed in by the shell
"""

from dataclasses import dataclass
from typing import Collection

from joyas_api.core.errors import InvalidOrderingError

DEFAULT_ORDER_BY = "precio_ASC"
DIRECTIONS = frozenset({"ASC", "DESC"})


@dataclass(frozen=True)
class Ordering:
    """Validated ORDER BY clause components."""
    field: str
    direction: str

    def to_sql(self) -> str:
        return f"{self.field} {self.direction}"


def parse_order_by(value: str, allowed_fields: Collection[str]) -> Ordering:
    """Split "<field>_<ASC|DESC>" and check both halves against the allow-lists."""
    field, sep, direction = value.rpartition("_")
    if not sep or not field:
        raise InvalidOrderingError(value)
    direction = direction.upper()
    if field not in allowed_fields or direction not in DIRECTIONS:
        raise InvalidOrderingError(value)
    return Ordering(field=field, direction=direction)

"""Inventory Schemas — Pydantic response models for the read endpoints.

Invariants:
    - Rows are passed through as opaque mappings (SELECT * semantics)
    - PageLinks serializes its first field as "self"

Design Decisions:
    - Alias for "self": avoids shadowing the conventional method argument name
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PageLinks(BaseModel):
    """HATEOAS navigation links for a listing page."""
    model_config = ConfigDict(populate_by_name=True)

    self_: str = Field(alias="self")
    next: str
    previous: str


class InventoryPage(BaseModel):
    """GET /items envelope."""
    data: list[dict[str, Any]]
    links: PageLinks

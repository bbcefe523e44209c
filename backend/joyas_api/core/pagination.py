"""Pagination — offset arithmetic and HATEOAS navigation links.

Invariants:
    - offset = (page - 1) * limit
    - previous link never points below page 1
    - next link is always page + 1, whether or not that page has rows

Design Decisions:
    - Links carry page, limit and order_by in that order so clients can
      replay them verbatim
"""

from urllib.parse import urlencode


def compute_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def build_page_links(
    base_url: str, page: int, limit: int, order_by: str,
) -> dict[str, str]:
    """Build self/next/previous links for a listing page."""

    def link(target_page: int) -> str:
        query = urlencode(
            {"page": target_page, "limit": limit, "order_by": order_by},
        )
        return f"{base_url}?{query}"

    return {
        "self": link(page),
        "next": link(page + 1),
        "previous": link(page - 1 if page > 1 else 1),
    }

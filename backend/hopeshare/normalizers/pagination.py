# hopeshare/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict

from hopeshare.application.site.listing import Listing
from hopeshare.utils.pagination import CursorMeta


def normalize_listing(
    listing: Listing,
    normalize_fn: Callable[[Any], Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Normalize a public listing (filters, state and optional page).

    The state lets clients tell an empty collection apart from
    a search that matched nothing.
    """
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in listing.items],
        "state": listing.state.value,
        "filters": {
            "category": listing.category,
            "q": listing.query,
        },
    }

    if listing.page is not None:
        response["pagination"] = {
            "page": listing.page.page,
            "per_page": listing.page.page_size,
            "total": listing.page.total,
            "total_pages": listing.page.total_pages,
        }

    return response


def normalize_cursor_page(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
) -> Dict[str, Any]:
    """Normalize a cursor-paginated response (admin audit views)."""
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["pagination"] = {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
            "prev_cursor": cursor["prev_cursor"],
        }

    return response

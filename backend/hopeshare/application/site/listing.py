# hopeshare/application/site/listing.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from hopeshare.utils.text import plain_text

ALL_CATEGORIES = "all"


class ListingState(str, Enum):
    EMPTY = "empty"            # the collection has no rows at all
    NO_RESULTS = "no_results"  # rows exist but none match the filters
    POPULATED = "populated"


@dataclass(frozen=True)
class Page:
    items: List[Any]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.page_size - 1) // self.page_size


@dataclass(frozen=True)
class Listing:
    items: List[Any]
    state: ListingState
    category: str
    query: str
    page: Optional[Page] = None


def _value(item: Any, field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def filter_by_category(items: Iterable[Any], category: Optional[str], field: str = "category") -> List[Any]:
    if not category or category == ALL_CATEGORIES:
        return list(items)
    return [item for item in items if _value(item, field) == category]


def search(
    items: Iterable[Any],
    query: Optional[str],
    fields: Sequence[str],
    html_fields: Sequence[str] = (),
) -> List[Any]:
    """
    Case-insensitive substring match over the given fields.
    Fields in html_fields are matched on their visible text only.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(items)

    def haystacks(item):
        for field in fields:
            value = _value(item, field)
            if value is None:
                continue
            text = plain_text(value) if field in html_fields else str(value)
            yield text.lower()

    return [item for item in items if any(needle in text for text in haystacks(item))]


def paginate(items: Sequence[Any], page: int, page_size: int) -> Page:
    """
    Fixed-size in-memory slice. Pages past the end are empty, not clamped.
    """
    if page_size <= 0:
        raise ValueError("page_size must be greater than zero")

    start = (page - 1) * page_size if page >= 1 else len(items)
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
    )


def build_listing(
    all_items: Sequence[Any],
    *,
    category: Optional[str] = None,
    query: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    search_fields: Sequence[str] = ("title",),
    html_fields: Sequence[str] = (),
) -> Listing:
    """
    Category filter, then text search, then (optionally) one page.
    Pure function of its inputs; the collection is fetched once by the caller.
    """
    filtered = filter_by_category(all_items, category)
    filtered = search(filtered, query, search_fields, html_fields)

    if not all_items:
        state = ListingState.EMPTY
    elif not filtered:
        state = ListingState.NO_RESULTS
    else:
        state = ListingState.POPULATED

    current_page = None
    items = filtered
    if page_size is not None:
        current_page = paginate(filtered, page or 1, page_size)
        items = current_page.items

    return Listing(
        items=items,
        state=state,
        category=category or ALL_CATEGORIES,
        query=query or "",
        page=current_page,
    )


def listing_args(args: Mapping[str, str]) -> Tuple[str, str, int]:
    """(category, query, page) from URL query parameters; page defaults to 1."""
    category = args.get("category") or ALL_CATEGORIES
    query = args.get("q") or ""
    try:
        page = int(args.get("page", 1))
    except (TypeError, ValueError):
        page = 1
    return category, query, page

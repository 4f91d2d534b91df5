# hopeshare/application/content/fetch_list.py
import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from hopeshare.domain.catalog import Filter, SortKey
from hopeshare.domain.invariants.exceptions import BackendError
from .collection import Collection

logger = logging.getLogger(__name__)


class CancellationToken:
    """Tied to the lifetime of whatever owns a FetchList."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class FetchList:
    """
    Reactive view over one collection query: items, loading, error.

    - Each load replaces items with the whole result set
    - A failed load is logged and keeps the last known items
    - One attempt per call; no cache, no retries
    - Responses arriving after close() are discarded
    """

    def __init__(
        self,
        collection: Union[str, Collection],
        *,
        filters: Sequence[Filter] = (),
        order: Optional[Sequence[SortKey]] = None,
        limit: Optional[int] = None,
        token: Optional[CancellationToken] = None,
    ):
        self.collection = Collection(collection) if isinstance(collection, str) else collection
        self.filters: Tuple[Filter, ...] = tuple(filters)
        self.order = tuple(order) if order is not None else None
        self.limit = limit
        self.token = token or CancellationToken()

        self.items: List[Any] = []
        self.loading = False
        self.error: Optional[BackendError] = None

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def mount(self) -> List[Any]:
        return self.refetch()

    def refetch(self) -> List[Any]:
        if self.token.cancelled:
            return self.items

        self.loading = True
        try:
            rows = self.collection.select(self.filters, self.order, self.limit)
        except BackendError as exc:
            if self.token.cancelled:
                return self.items
            logger.error("Error fetching %s: %s", self.collection.name, exc)
            self.error = exc
            self.loading = False
            return self.items

        if self.token.cancelled:
            logger.debug("Discarding %s response after close", self.collection.name)
            return self.items

        self.items = list(rows)
        self.error = None
        self.loading = False
        return self.items

    def set_filters(self, filters: Sequence[Filter]) -> List[Any]:
        filters = tuple(filters)
        if filters == self.filters:
            return self.items
        self.filters = filters
        return self.refetch()

    def close(self) -> None:
        self.token.cancel()

# hopeshare/application/content/collection.py
import copy
import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from dateutil.parser import isoparse
from sqlalchemy.exc import SQLAlchemyError

from hopeshare.extensions import db
from hopeshare.domain.catalog import CollectionSpec, Filter, SortKey, get_collection_spec
from hopeshare.domain.invariants.exceptions import (
    BackendError,
    EntityNotFound,
    InvariantViolation,
)

logger = logging.getLogger(__name__)

READ_ONLY_FIELDS = {"id", "created_at", "updated_at"}


class Collection:
    """
    Table-oriented access to one named collection.

    Writes only flush; the caller owns the transaction boundary.
    Database failures surface as BackendError after a rollback.
    """

    def __init__(self, name: str):
        self.spec: CollectionSpec = get_collection_spec(name)
        self.name = name
        self.model = self.spec.model

    def __repr__(self):
        return f"<Collection {self.name}>"

    # ------------------------
    # Introspection
    # ------------------------
    @property
    def columns(self):
        return self.model.__table__.columns

    @property
    def editable_fields(self) -> List[str]:
        return [c.key for c in self.columns if c.key not in READ_ONLY_FIELDS]

    def _column(self, field: str):
        if field not in self.columns:
            raise InvariantViolation(f"Unknown field for {self.name}: {field}", field=field)
        return getattr(self.model, field)

    def default_for(self, field: str) -> Any:
        return copy.deepcopy(self.spec.defaults.get(field))

    def blank_form(self) -> Dict[str, Any]:
        return {field: self.default_for(field) for field in self.editable_fields}

    def to_form(self, row) -> Dict[str, Any]:
        return {field: copy.deepcopy(getattr(row, field)) for field in self.editable_fields}

    # ------------------------
    # Reads
    # ------------------------
    @contextmanager
    def _backend(self, operation: str):
        try:
            yield
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Backend %s on %s failed: %s", operation, self.name, exc)
            raise BackendError() from exc

    def select(
        self,
        filters: Iterable[Filter] = (),
        order: Optional[Sequence[SortKey]] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        query = self.model.query

        for field, value in filters:
            query = query.filter(self._column(field) == value)

        for field, direction in (self.spec.order if order is None else order):
            column = self._column(field)
            if direction not in ("asc", "desc"):
                raise InvariantViolation(f"Invalid sort direction: {direction}", field=field)
            query = query.order_by(column.desc() if direction == "desc" else column.asc())

        # Stable tie-break so repeated reads return the same order
        query = query.order_by(self.model.id.asc())

        if limit is not None:
            query = query.limit(limit)

        with self._backend("select"):
            return query.all()

    def get(self, entity_id: str):
        with self._backend("get"):
            row = db.session.get(self.model, entity_id)
        if row is None:
            raise EntityNotFound(f"{self.name} record not found")
        return row

    def count(self) -> int:
        with self._backend("count"):
            return db.session.query(db.func.count(self.model.id)).scalar() or 0

    # ------------------------
    # Writes
    # ------------------------
    def _coerce(self, field: str, value: Any) -> Any:
        if value is None or value == "":
            return None if value is None or self._nullable(field) else value

        python_type = self._python_type(field)
        if python_type is date and isinstance(value, str):
            return self._parse_date(field, value).date()
        if python_type is datetime and isinstance(value, str):
            return self._parse_date(field, value)
        return value

    def _nullable(self, field: str) -> bool:
        return bool(self.columns[field].nullable)

    def _python_type(self, field: str):
        try:
            return self.columns[field].type.python_type
        except NotImplementedError:
            return None

    @staticmethod
    def _parse_date(field: str, value: str):
        try:
            return isoparse(value)
        except ValueError as exc:
            raise InvariantViolation(f"{field} is not a valid date", field=field) from exc

    def _assign(self, row, data: Dict[str, Any], *, replace: bool) -> None:
        for field in self.editable_fields:
            if field in data:
                value = self._coerce(field, data[field])
            elif replace:
                value = self.default_for(field)
            else:
                continue

            if value is None and field in self.spec.defaults:
                value = self.default_for(field)
            setattr(row, field, value)

    def insert(self, data: Dict[str, Any]):
        row = self.model()
        self._assign(row, data, replace=True)

        with self._backend("insert"):
            db.session.add(row)
            db.session.flush()
        return row

    def replace(self, entity_id: str, data: Dict[str, Any], row=None):
        """Whole-record replace: omitted editable fields revert to defaults."""
        row = row if row is not None else self.get(entity_id)
        self._assign(row, data, replace=True)

        with self._backend("update"):
            db.session.flush()
        return row

    def delete(self, entity_id: str) -> None:
        row = self.get(entity_id)
        with self._backend("delete"):
            db.session.delete(row)
            db.session.flush()

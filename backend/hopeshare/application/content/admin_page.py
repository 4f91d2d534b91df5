# hopeshare/application/content/admin_page.py
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from hopeshare.domain.invariants.entity import assert_entity
from hopeshare.domain.invariants.exceptions import (
    GENERIC_ERROR_MESSAGE,
    BackendError,
    EntityNotFound,
    InvariantViolation,
    StaleWrite,
)
from hopeshare.domain.lifecycle.admin_page import PageState, assert_page_transition
from .collection import Collection
from .create_entity import create_entity
from .delete_entity import delete_entity
from .fetch_list import FetchList
from .replace_entity import replace_entity
from .save_ordered import save_ordered

logger = logging.getLogger(__name__)

# confirm(prompt) -> True when the user affirmed
ConfirmProvider = Callable[[str], bool]
# notify(level, message), level is "success" or "error"
Notifier = Callable[[str, str], None]


class AdminCrudPage:
    """
    One admin management screen: a table of records plus a create/edit
    dialog, driven by an explicit state machine.

    listing → creating | editing → saving → listing
    listing → deleting (confirm) → listing
    """

    def __init__(
        self,
        collection: str,
        *,
        confirm: ConfirmProvider,
        notify: Notifier,
        actor_id: Optional[str] = None,
        versioned: bool = False,
    ):
        self.collection = Collection(collection)
        self.confirm = confirm
        self.notify = notify
        self.actor_id = actor_id
        # edits carry the loaded updated_at and fail on a newer row
        self.versioned = versioned

        self.view = FetchList(self.collection, order=self.collection.spec.order)
        self.state = PageState.LISTING
        self.form: Dict[str, Any] = {}
        self.editing_id: Optional[str] = None
        self.loaded_at: Optional[datetime] = None

    @property
    def items(self) -> List[Any]:
        return self.view.items

    @property
    def loading(self) -> bool:
        return self.view.loading

    def _transition(self, to_state: PageState) -> None:
        assert_page_transition(from_state=self.state, to_state=to_state)
        self.state = to_state

    def load(self) -> List[Any]:
        return self.view.mount()

    def close(self) -> None:
        self.view.close()

    # ------------------------
    # Dialog
    # ------------------------
    def _require_editable(self) -> None:
        if self.collection.spec.inbox:
            raise InvariantViolation(f"{self.collection.name} records are read-only")

    def open_create(self) -> Dict[str, Any]:
        self._require_editable()
        self._transition(PageState.CREATING)
        self.editing_id = None
        self.loaded_at = None
        self.form = self.collection.blank_form()
        if self.collection.spec.ordered:
            self.form["display_order"] = len(self.items)
        return self.form

    def open_edit(self, entity_id: str) -> Dict[str, Any]:
        row = next((r for r in self.items if r.id == entity_id), None)
        if row is None:
            raise EntityNotFound(f"{self.collection.name} record not found")
        self._require_editable()

        self._transition(PageState.EDITING)
        self.editing_id = entity_id
        self.loaded_at = row.updated_at
        self.form = self.collection.to_form(row)
        return self.form

    def cancel(self) -> None:
        self._transition(PageState.LISTING)
        self.form = {}
        self.editing_id = None
        self.loaded_at = None

    def save(self) -> bool:
        dialog_state = self.state
        if dialog_state not in (PageState.CREATING, PageState.EDITING):
            raise ValueError(f"Nothing to save while {self.state.value}")

        try:
            assert_entity(self.collection.name, self.form)
        except InvariantViolation as exc:
            self.notify("error", exc.message)
            return False

        self._transition(PageState.SAVING)
        try:
            if dialog_state is PageState.CREATING:
                create_entity(
                    collection=self.collection.name,
                    actor_id=self.actor_id,
                    data=dict(self.form),
                )
            else:
                replace_entity(
                    collection=self.collection.name,
                    entity_id=self.editing_id,
                    actor_id=self.actor_id,
                    data=dict(self.form),
                    if_unmodified_since=self.loaded_at if self.versioned else None,
                )
        except InvariantViolation as exc:
            self.notify("error", exc.message)
            self._transition(dialog_state)
            return False
        except (BackendError, EntityNotFound, StaleWrite) as exc:
            logger.error("Saving %s failed: %s", self.collection.name, exc)
            self.notify("error", GENERIC_ERROR_MESSAGE)
            self._transition(dialog_state)
            return False

        self.notify("success", "Saved")
        self._transition(PageState.LISTING)
        self.form = {}
        self.editing_id = None
        self.loaded_at = None
        self.view.refetch()
        return True

    # ------------------------
    # Delete
    # ------------------------
    def delete(self, entity_id: str) -> bool:
        self._transition(PageState.DELETING)
        try:
            if not self.confirm("Are you sure you want to delete this item?"):
                return False

            try:
                delete_entity(
                    collection=self.collection.name,
                    entity_id=entity_id,
                    actor_id=self.actor_id,
                    confirmed=True,
                )
                deleted = True
            except (BackendError, EntityNotFound) as exc:
                logger.error("Deleting %s %s failed: %s", self.collection.name, entity_id, exc)
                deleted = False

            if deleted:
                self.notify("success", "Deleted")
            else:
                self.notify("error", GENERIC_ERROR_MESSAGE)
            self.view.refetch()
            return deleted
        finally:
            self._transition(PageState.LISTING)

    # ------------------------
    # Ordered batch
    # ------------------------
    def save_all(self, rows: Sequence[Dict[str, Any]]) -> bool:
        """Persist the whole ordered list; display_order follows list position."""
        if self.state is not PageState.LISTING:
            raise ValueError(f"Cannot batch save while {self.state.value}")

        try:
            save_ordered(
                collection=self.collection.name,
                rows=rows,
                actor_id=self.actor_id,
            )
        except InvariantViolation as exc:
            self.notify("error", exc.message)
            return False
        except (BackendError, EntityNotFound) as exc:
            logger.error("Batch save of %s failed: %s", self.collection.name, exc)
            self.notify("error", GENERIC_ERROR_MESSAGE)
            return False

        self.notify("success", "Saved")
        self.view.refetch()
        return True

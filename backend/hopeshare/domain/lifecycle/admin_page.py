from enum import Enum
from typing import Dict, Set


class PageState(str, Enum):
    LISTING = "listing"
    CREATING = "creating"
    EDITING = "editing"
    SAVING = "saving"
    DELETING = "deleting"


# Explicit allowed state transitions for an admin CRUD screen
ALLOWED_PAGE_TRANSITIONS: Dict[PageState, Set[PageState]] = {
    PageState.LISTING: {PageState.CREATING, PageState.EDITING, PageState.DELETING},
    PageState.CREATING: {PageState.SAVING, PageState.LISTING},
    PageState.EDITING: {PageState.SAVING, PageState.LISTING},
    # saving falls back to the open dialog on failure
    PageState.SAVING: {PageState.LISTING, PageState.CREATING, PageState.EDITING},
    PageState.DELETING: {PageState.LISTING},
}


def assert_page_transition(*, from_state: PageState, to_state: PageState) -> None:
    """
    Guards admin page transitions.
    Single source of truth for state changes.
    """
    allowed = ALLOWED_PAGE_TRANSITIONS.get(from_state, set())

    if to_state not in allowed:
        raise ValueError(
            f"Illegal admin page transition: {from_state.value} → {to_state.value}"
        )

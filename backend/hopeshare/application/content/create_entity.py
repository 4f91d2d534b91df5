from typing import Any, Dict, Optional
from hopeshare.domain.invariants.entity import assert_entity
from hopeshare.domain.invariants.exceptions import InvariantViolation
from hopeshare.utils.audit import log_action
from hopeshare.utils.transaction import transactional
from .collection import Collection


def create_entity(
    *,
    collection: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
):
    """
    Insert one admin-managed record.

    Edge cases handled:
    - Missing required fields (nothing is written)
    - Inbox collections are written by public forms only
    """
    store = Collection(collection)

    if store.spec.inbox:
        raise InvariantViolation(f"{collection} records cannot be created by admins")

    assert_entity(collection, data)

    with transactional():
        row = store.insert(data)

        log_action(
            action=f"{collection}.create",
            entity_type=collection,
            entity_id=row.id,
            actor_id=actor_id,
            payload={"fields": sorted(k for k in data if k in store.editable_fields)},
        )

    return row

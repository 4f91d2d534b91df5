from datetime import datetime
from typing import Any, Dict, Optional
from hopeshare.domain.invariants.entity import assert_entity
from hopeshare.domain.invariants.exceptions import InvariantViolation
from hopeshare.utils.audit import log_action
from hopeshare.utils.optimistic_lock import enforce_optimistic_lock
from hopeshare.utils.transaction import transactional
from .collection import Collection


def replace_entity(
    *,
    collection: str,
    entity_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
    if_unmodified_since: Optional[datetime] = None,
):
    """
    Replace every editable field of a record.

    Design rules:
    - No partial patch: omitted fields revert to their defaults
    - Invariants revalidated before the write
    - Last write wins unless the caller supplies if_unmodified_since
    """
    store = Collection(collection)

    if store.spec.inbox:
        raise InvariantViolation(f"{collection} records cannot be edited")

    assert_entity(collection, data)

    row = store.get(entity_id)
    enforce_optimistic_lock(row, if_unmodified_since)

    with transactional():
        store.replace(entity_id, data, row=row)

        log_action(
            action=f"{collection}.update",
            entity_type=collection,
            entity_id=row.id,
            actor_id=actor_id,
            payload={"fields": sorted(k for k in data if k in store.editable_fields)},
        )

    return row

from typing import Any, Dict, List, Optional, Sequence
from hopeshare.domain.invariants.entity import assert_entity
from hopeshare.domain.invariants.exceptions import InvariantViolation
from hopeshare.utils.audit import log_action
from hopeshare.utils.transaction import transactional
from .collection import Collection


def save_ordered(
    *,
    collection: str,
    rows: Sequence[Dict[str, Any]],
    actor_id: Optional[str],
) -> List[Any]:
    """
    Persist an ordered list of records in one save action.

    Responsibilities:
    - display_order recomputed from each row's position
    - Rows without an id are inserted, rows with an id are replaced
    - Single transaction: any failing row rolls back the whole batch
    - Audit logging once per batch
    """
    store = Collection(collection)

    if not store.spec.ordered or store.spec.inbox:
        raise InvariantViolation(f"{collection} does not support ordered saves")

    prepared = []
    for index, row in enumerate(rows):
        data = dict(row, display_order=index)
        try:
            assert_entity(collection, data)
        except InvariantViolation as exc:
            raise InvariantViolation(f"Item {index + 1}: {exc.message}", field=exc.field) from exc
        prepared.append(data)

    saved = []
    with transactional(f"{collection} batch save"):
        for data in prepared:
            entity_id = data.get("id")
            if entity_id:
                saved.append(store.replace(entity_id, data))
            else:
                saved.append(store.insert(data))

        log_action(
            action=f"{collection}.batch_save",
            entity_type=collection,
            entity_id="*",
            actor_id=actor_id,
            payload={"count": len(saved), "ids": [r.id for r in saved]},
        )

    return saved

from typing import Optional
from hopeshare.domain.invariants.exceptions import ConfirmationRequired
from hopeshare.normalizers.entity import normalize_entity
from hopeshare.utils.audit import log_action
from hopeshare.utils.transaction import transactional
from .collection import Collection


def delete_entity(
    *,
    collection: str,
    entity_id: str,
    actor_id: Optional[str],
    confirmed: bool,
) -> None:
    """
    Hard-delete a record once the caller has confirmed.

    Notes:
    - No soft-delete and no cascade
    - The audit entry keeps a snapshot of the deleted row
    """
    if not confirmed:
        raise ConfirmationRequired("Deletion must be confirmed")

    store = Collection(collection)
    row = store.get(entity_id)
    snapshot = normalize_entity(row, admin=True)

    with transactional():
        store.delete(entity_id)

        log_action(
            action=f"{collection}.delete",
            entity_type=collection,
            entity_id=entity_id,
            actor_id=actor_id,
            payload={"snapshot": snapshot},
        )

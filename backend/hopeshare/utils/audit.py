from flask import g, has_app_context
from hopeshare.extensions import db
from hopeshare.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    payload: dict | None = None
):
    if actor_id is None and has_app_context():
        user = getattr(g, "current_user", None)
        actor_id = user.id if user is not None else None

    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = str(entity_id) if entity_id is not None else "*"
    log.payload = payload or {}

    db.session.add(log)

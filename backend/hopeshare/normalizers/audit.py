# hopeshare/normalizers/audit.py
from typing import Any, Dict
from hopeshare.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """Delete entries keep the removed row under payload["snapshot"]."""
    payload = log.payload or {}
    return {
        "id": log.id,
        "action": log.action,
        "actor_id": log.actor_id,
        "entity": {"type": log.entity_type, "id": log.entity_id},
        "payload": payload,
        "has_snapshot": "snapshot" in payload,
        "created_at": log.created_at.isoformat(),
    }

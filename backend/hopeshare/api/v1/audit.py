from flask import request, jsonify
from hopeshare.models.audit_log import AuditLog
from hopeshare.normalizers.audit import normalize_audit_log
from hopeshare.normalizers.pagination import normalize_cursor_page
from hopeshare.utils.pagination import paginate_cursor
from .admin import admin_bp


@admin_bp.route("/audit", methods=["GET"])
def list_audit_logs():
    # Cursor Pagination
    limit = min(request.args.get("limit", 20, type=int), 100)
    cursor = request.args.get("cursor")

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(query, model=AuditLog, limit=limit, cursor=cursor)

    return jsonify(normalize_cursor_page(logs, normalize_audit_log, cursor=meta)), 200

# hopeshare/api/v1/admin.py
from flask import Blueprint, g, request, jsonify
from werkzeug.exceptions import MethodNotAllowed
from hopeshare.application.content.collection import Collection
from hopeshare.application.content.create_entity import create_entity
from hopeshare.application.content.delete_entity import delete_entity
from hopeshare.application.content.replace_entity import replace_entity
from hopeshare.application.content.save_ordered import save_ordered
from hopeshare.application.site.dashboard import dashboard_counts
from hopeshare.application.site.settings import load_settings, save_settings
from hopeshare.domain.invariants.exceptions import InvariantViolation
from hopeshare.middleware.admin_gate import admin_gate
from hopeshare.normalizers.entity import normalize_entity
from hopeshare.utils.media import save_file, delete_file
from hopeshare.utils.optimistic_lock import unmodified_since_header

admin_bp = Blueprint("admin", __name__)
admin_gate(admin_bp)

TRUTHY = ("1", "true", "yes")


def _actor_id():
    return g.current_user.id


def _writable(name):
    store = Collection(name)
    if store.spec.inbox:
        raise MethodNotAllowed(valid_methods=["GET", "DELETE"])
    return store


def _json_object():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object")
    return data


# ------------------------
# Dashboard & settings
# ------------------------

@admin_bp.route("/dashboard", methods=["GET"])
def dashboard():
    return jsonify({
        "user": {"id": g.current_user.id, "email": g.current_user.email},
        "counts": dashboard_counts(),
    })


@admin_bp.route("/settings", methods=["GET"])
def get_settings():
    return jsonify(load_settings())


@admin_bp.route("/settings", methods=["PUT"])
def update_settings():
    settings = save_settings(values=_json_object(), actor_id=_actor_id())
    return jsonify(settings), 200


# ------------------------
# Media
# ------------------------

@admin_bp.route("/media", methods=["POST"])
def upload_media():
    kind = request.form.get("kind", "file")
    url = save_file(request.files.get("file"), kind=kind)
    return jsonify({"url": url}), 201


@admin_bp.route("/media", methods=["DELETE"])
def remove_media():
    url = request.args.get("url")
    if not url:
        raise InvariantViolation("url is required", field="url")
    return jsonify({"deleted": delete_file(url)}), 200


# ------------------------
# Collections
# ------------------------

@admin_bp.route("/<collection>", methods=["GET"])
def list_entities(collection):
    rows = Collection(collection).select()
    return jsonify({"items": [normalize_entity(r, admin=True) for r in rows]})


@admin_bp.route("/<collection>", methods=["POST"])
def create(collection):
    _writable(collection)
    row = create_entity(
        collection=collection,
        actor_id=_actor_id(),
        data=_json_object(),
    )
    return jsonify(normalize_entity(row, admin=True)), 201


@admin_bp.route("/<collection>/batch", methods=["PUT"])
def save_batch(collection):
    _writable(collection)
    rows = request.get_json(silent=True)
    if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
        raise InvariantViolation("Request body must be a JSON array of objects")

    saved = save_ordered(collection=collection, rows=rows, actor_id=_actor_id())
    return jsonify({"items": [normalize_entity(r, admin=True) for r in saved]}), 200


@admin_bp.route("/<collection>/<entity_id>", methods=["GET"])
def get_entity(collection, entity_id):
    row = Collection(collection).get(entity_id)
    return jsonify(normalize_entity(row, admin=True))


@admin_bp.route("/<collection>/<entity_id>", methods=["PUT"])
def replace(collection, entity_id):
    _writable(collection)
    row = replace_entity(
        collection=collection,
        entity_id=entity_id,
        actor_id=_actor_id(),
        data=_json_object(),
        if_unmodified_since=unmodified_since_header(),
    )
    return jsonify(normalize_entity(row, admin=True)), 200


@admin_bp.route("/<collection>/<entity_id>", methods=["DELETE"])
def delete(collection, entity_id):
    delete_entity(
        collection=collection,
        entity_id=entity_id,
        actor_id=_actor_id(),
        confirmed=request.args.get("confirm", "").lower() in TRUTHY,
    )
    return jsonify({"message": "Deleted successfully"}), 200

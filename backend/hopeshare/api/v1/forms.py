from flask import request, jsonify
from hopeshare.application.site.forms import submit_form
from . import v1_bp


def _submit(form):
    row = submit_form(form, request.get_json(silent=True) or {})
    return jsonify({"id": row.id, "message": "Submitted successfully"}), 201


@v1_bp.route("/contact", methods=["POST"])
def submit_contact():
    return _submit("contact")


@v1_bp.route("/donations", methods=["POST"])
def submit_donation():
    return _submit("donation")


@v1_bp.route("/volunteers", methods=["POST"])
def submit_volunteer():
    return _submit("volunteer")

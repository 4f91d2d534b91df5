from flask import request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt_identity,
    jwt_required,
)
from hopeshare.extensions import db
from hopeshare.models.user import User
from hopeshare.utils.transaction import transactional
from . import v1_bp

MIN_PASSWORD_LENGTH = 6


def issue_tokens(user):
    claims = {"is_admin": user.is_admin}
    return {
        "access_token": create_access_token(identity=user.id, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=user.id, additional_claims=claims),
    }


def user_payload(user):
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "is_admin": user.is_admin,
    }


@v1_bp.route("/auth/signup", methods=["POST"])
def signup():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "validation", "message": "Invalid request body"}), 400

    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""

    if not email or not password:
        return jsonify({"error": "validation", "message": "Email and password required"}), 400

    if len(password) < MIN_PASSWORD_LENGTH:
        return jsonify({
            "error": "validation",
            "message": f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        }), 400

    if User.query.filter_by(email=email).first():
        return jsonify({"error": "conflict", "message": "Email already registered"}), 409

    user = User()
    user.email = email
    user.name = (data.get("name") or "").strip() or None
    user.role = "user"
    user.set_password(password)

    with transactional():
        db.session.add(user)

    return jsonify(user_payload(user)), 201


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "validation", "message": "Invalid request body"}), 400

    email = (data.get("email") or "").strip().lower()
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "validation", "message": "Email and password required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "unauthorized", "message": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "forbidden", "message": "User account disabled"}), 403

    return jsonify(issue_tokens(user)), 200


@v1_bp.route("/auth/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    user = db.session.get(User, get_jwt_identity())
    if user is None or not user.is_active:
        return jsonify({"error": "unauthorized", "message": "Login required"}), 401

    claims = {"is_admin": user.is_admin}
    return jsonify({
        "access_token": create_access_token(identity=user.id, additional_claims=claims)
    }), 200


@v1_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    user = db.session.get(User, get_jwt_identity())
    if user is None:
        return jsonify({"error": "unauthorized", "message": "Login required"}), 401

    return jsonify(user_payload(user)), 200

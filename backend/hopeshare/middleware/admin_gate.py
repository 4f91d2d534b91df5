from flask import g
from flask_jwt_extended import verify_jwt_in_request, get_jwt, get_jwt_identity
from hopeshare.extensions import db
from hopeshare.models.user import User
from hopeshare.errors import error_response
from hopeshare.domain.invariants.exceptions import ErrorKind


def admin_gate(blueprint):
    """
    Single authorization gate for every admin route:
    no/invalid token -> 401, authenticated non-admin -> 403.
    """
    @blueprint.before_request
    def require_admin():
        verify_jwt_in_request()

        user = db.session.get(User, get_jwt_identity())
        if user is None or not user.is_active:
            return error_response(ErrorKind.UNAUTHORIZED, "Login required", 401)

        if not get_jwt().get("is_admin") or not user.is_admin:
            return error_response(ErrorKind.FORBIDDEN, "Admin privileges required", 403)

        # Attach user to global context
        g.current_user = user

from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from hopeshare.domain.invariants.exceptions import (
    ErrorKind,
    GENERIC_ERROR_MESSAGE,
    SiteError,
    InvariantViolation,
)


def error_response(kind, message, status_code, **extra):
    body = {"error": kind.value if isinstance(kind, ErrorKind) else kind, "message": message}
    body.update(extra)
    response = jsonify(body)
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return error_response(error.kind, error.message, error.status_code, field=error.field)

    @app.errorhandler(SiteError)
    def handle_site_error(error):
        return error_response(error.kind, error.message, error.status_code)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        current_app.logger.error("Unhandled database error: %s", error)
        return error_response(ErrorKind.BACKEND, GENERIC_ERROR_MESSAGE, 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        kinds = {
            401: ErrorKind.UNAUTHORIZED,
            403: ErrorKind.FORBIDDEN,
            404: ErrorKind.NOT_FOUND,
            409: ErrorKind.CONFLICT,
        }
        kind = kinds.get(error.code, error.name.lower().replace(" ", "_"))
        return error_response(kind, error.description, error.code)


def register_jwt_handlers(jwt):
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return error_response(ErrorKind.UNAUTHORIZED, "Login required", 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return error_response(ErrorKind.UNAUTHORIZED, "Invalid token", 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return error_response(ErrorKind.UNAUTHORIZED, "Session expired, please log in again", 401)

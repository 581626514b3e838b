from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException


class DirectoryError(Exception):
    """Base class for errors the API translates into a JSON response."""

    status_code = 500
    kind = "DirectoryError"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.kind)
        self.message = message or self.kind


class ValidationError(DirectoryError):
    status_code = 400
    kind = "ValidationError"


class NotFoundError(DirectoryError):
    status_code = 404
    kind = "NotFound"


class ConflictError(DirectoryError):
    status_code = 409
    kind = "Conflict"


class InUseError(ConflictError):
    kind = "InUse"


class StaleWriteError(ConflictError):
    kind = "StaleWrite"


class InvalidCredentialsError(DirectoryError):
    status_code = 401
    kind = "InvalidCredentials"

    def __init__(self, message: str | None = None):
        super().__init__(message or "Invalid credentials")


def error_response(kind, message, status_code):
    response = jsonify({
        "error": kind,
        "message": message
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(DirectoryError)
    def handle_directory_error(error):
        return error_response(error.kind, error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.name, error.description, error.code)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        current_app.logger.exception("Store error: %s", error)
        return error_response("StoreError", "Database operation failed", 500)


def register_jwt_handlers(jwt):
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return error_response("Unauthorized", reason, 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return error_response("Unauthorized", reason, 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return error_response("Unauthorized", "Token has expired", 401)

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class TodoApiError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoApiError):
    status_code = 400


class NotFoundError(TodoApiError):
    status_code = 404

    def __init__(self, todo_id, operation: str):
        super().__init__(f"Todo {todo_id} not found ({operation})")
        self.todo_id = todo_id
        self.operation = operation


class StorageReadError(TodoApiError):
    def __init__(self, cause):
        super().__init__(f"Failed to read todo file: {cause}")
        self.cause = cause


class StorageWriteError(TodoApiError):
    def __init__(self, cause):
        super().__init__(f"Failed to write todo file: {cause}")
        self.cause = cause


def error_response(message: str, status_code: int):
    return jsonify({"success": False, "message": message}), status_code


def register_error_handlers(app):
    @app.errorhandler(TodoApiError)
    def handle_todo_error(error):
        if error.status_code >= 500:
            logger.error(error.message)
        return error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error while serving request")
        return error_response("Internal server error", 500)

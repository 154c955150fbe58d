import logging

from flask import jsonify, request
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from staffing.extensions import db

logger = logging.getLogger(__name__)


class StaffingError(Exception):
    """Base error carrying the HTTP status the envelope is returned with."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"success": False, "error": self.message}


class ValidationError(StaffingError):
    status_code = 400

    def __init__(self, details, error="Validation failed", message="Please check your input data"):
        super().__init__(error)
        self.details = details
        self.hint = message

    def to_dict(self):
        return {
            "success": False,
            "error": self.message,
            "message": self.hint,
            "details": self.details,
        }


class NotFoundError(StaffingError):
    status_code = 404


class ConflictError(StaffingError):
    status_code = 409


class StateError(StaffingError):
    """Operation not allowed by the current status of an entity."""

    status_code = 400


class PersistenceError(StaffingError):
    """The store failed for a reason the caller cannot fix."""

    status_code = 500

    def __init__(self, message="Something went wrong"):
        super().__init__(message)

    def to_dict(self):
        return {"success": False, "message": "Internal server error", "error": self.message}


def register_error_handlers(app):
    @app.errorhandler(StaffingError)
    def handle_staffing_error(error):
        if error.status_code >= 500:
            logger.error("❌ %s", error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        logger.warning("Integrity error: %s", error.orig)
        return jsonify({
            "success": False,
            "error": "Resource conflicts with existing data",
        }), 409

    @app.errorhandler(DataError)
    def handle_data_error(error):
        db.session.rollback()
        logger.warning("Data error: %s", error.orig)
        return jsonify({
            "success": False,
            "error": "One or more fields exceed maximum length",
        }), 400

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        logger.exception("Database error")
        persistence_error = PersistenceError(str(error)) if app.debug else PersistenceError()
        return handle_staffing_error(persistence_error)

    @app.errorhandler(NotFound)
    def handle_route_not_found(error):
        return jsonify({
            "success": False,
            "message": "Route not found",
            "path": request.path,
            "method": request.method,
        }), 404

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error):
        return jsonify({
            "success": False,
            "message": "Method not allowed",
            "path": request.path,
            "method": request.method,
        }), 405

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({
            "success": False,
            "error": error.name,
            "message": error.description,
        }), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("💥 Unhandled error on %s %s", request.method, request.path)
        return _internal_error(app, error)


def _internal_error(app, error):
    body = {
        "success": False,
        "message": "Internal server error",
        "error": str(error) if app.debug else "Something went wrong",
    }
    return jsonify(body), 500

import logging
from datetime import datetime

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from staffing.extensions import db

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)

API_NAME = "Staffing Management API"
API_VERSION = "1.0.0"


def check_database():
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("❌ Database connection test failed: %s", e)
        return False


@health_bp.route("/", methods=["GET"])
def index():
    return jsonify({
        "message": API_NAME,
        "version": API_VERSION,
        "timestamp": datetime.utcnow().isoformat(),
    })


@health_bp.route("/health", methods=["GET"])
def health():
    """Liveness plus store connectivity; an unreachable store only degrades the status."""
    try:
        healthy = check_database()
    except Exception as e:
        logger.exception("Health check failed")
        return jsonify({
            "status": "Error",
            "database": "Disconnected",
            "server": "Running",
            "error": str(e),
            "timestamp": datetime.utcnow().isoformat(),
        }), 503

    return jsonify({
        "status": "OK" if healthy else "Degraded",
        "database": "Connected" if healthy else "Disconnected",
        "server": "Running",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": current_app.config.get("APP_ENV", "development"),
    })


@health_bp.route("/api/info", methods=["GET"])
def api_info():
    return jsonify({
        "name": API_NAME,
        "version": API_VERSION,
        "description": "Backend API for Staffing Management System",
        "endpoints": {
            "candidates": "/api/candidates",
            "clients": "/api/clients",
            "job_orders": "/api/job-orders",
            "assignments": "/api/assignments",
            "dashboard": "/api/dashboard",
            "health": "/health",
        },
    })

from flask import Blueprint

from staffing.responses import success
from staffing.services import dashboard_service

dashboard_bp = Blueprint("dashboard_api", __name__, url_prefix="/api/dashboard")


@dashboard_bp.route("/stats", methods=["GET"])
def dashboard_stats():
    return success(dashboard_service().stats())


@dashboard_bp.route("/recent-activity", methods=["GET"])
def recent_activity():
    return success(dashboard_service().recent_activity())

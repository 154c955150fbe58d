from flask import Blueprint

from staffing.responses import success
from staffing.schemas import JobOrderCreate, JobOrderFilter, JobOrderUpdate
from staffing.services import job_order_service
from staffing.validation import parse_id, validate

job_orders_bp = Blueprint("job_orders_api", __name__, url_prefix="/api/job-orders")


@job_orders_bp.route("", methods=["GET"])
@validate(JobOrderFilter, source="query")
def list_job_orders(payload):
    return success(job_order_service().list(status=payload.status, client_id=payload.client_id))


@job_orders_bp.route("/open", methods=["GET"])
def list_open_job_orders():
    return success(job_order_service().list_open())


@job_orders_bp.route("/<job_order_id>", methods=["GET"])
def get_job_order(job_order_id):
    """Job order with client contact details and its assignments."""
    return success(job_order_service().get(parse_id(job_order_id, "job order")))


@job_orders_bp.route("", methods=["POST"])
@validate(JobOrderCreate)
def create_job_order(payload):
    job_order = job_order_service().create(payload)
    return success(job_order, status=201, message="Job order created successfully")


@job_orders_bp.route("/<job_order_id>", methods=["PUT"])
@validate(JobOrderUpdate)
def update_job_order(job_order_id, payload):
    job_order = job_order_service().update(parse_id(job_order_id, "job order"), payload)
    return success(job_order, message="Job order updated successfully")

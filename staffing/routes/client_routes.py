from flask import Blueprint

from staffing.responses import success
from staffing.schemas import ClientCreate, ClientUpdate
from staffing.services import client_service
from staffing.validation import parse_id, validate

clients_bp = Blueprint("clients_api", __name__, url_prefix="/api/clients")


@clients_bp.route("", methods=["GET"])
def list_clients():
    """Active clients with their number of open job orders."""
    return success(client_service().list())


@clients_bp.route("/stats", methods=["GET"])
def clients_with_stats():
    return success(client_service().list_with_stats())


@clients_bp.route("/<client_id>", methods=["GET"])
def get_client(client_id):
    return success(client_service().get(parse_id(client_id, "client")))


@clients_bp.route("", methods=["POST"])
@validate(ClientCreate)
def create_client(payload):
    client = client_service().create(payload)
    return success(client, status=201, message="Client created successfully")


@clients_bp.route("/<client_id>", methods=["PUT"])
@validate(ClientUpdate)
def update_client(client_id, payload):
    client = client_service().update(parse_id(client_id, "client"), payload.to_patch())
    return success(client, message="Client updated successfully")

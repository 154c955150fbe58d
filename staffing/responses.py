from flask import jsonify


def success(data=None, status=200, message=None, **extra):
    """Build the ``{success, message?, data?, ...}`` envelope."""
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status

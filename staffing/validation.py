from functools import wraps

from flask import request
from pydantic import ValidationError as PydanticValidationError

from staffing.errors import ValidationError
from staffing.schemas import IdParam

# error / message pairs used for each request part
SOURCES = {
    "json": ("Validation failed", "Please check your input data"),
    "query": ("Invalid query parameters", "Please check your search/filter parameters"),
}


def format_errors(exc):
    """Flatten pydantic errors into ``{field, message, type}`` triples."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


def parse(schema, data, error="Validation failed", message="Please check your input data"):
    """Validate ``data`` against ``schema`` and return the normalized model.

    Unknown keys are dropped; every violated field is reported at once.
    """
    try:
        return schema.model_validate(data if data is not None else {})
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc), error=error, message=message) from exc


def parse_id(value, entity):
    return parse(
        IdParam,
        {"id": value},
        error=f"Valid {entity} ID is required",
        message="Please check your URL parameters",
    ).id


def validate(schema, source="json"):
    """Route decorator that validates the body or query string and passes it as ``payload``."""
    error, message = SOURCES[source]

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if source == "json":
                data = request.get_json(silent=True)
            else:
                data = request.args.to_dict()
            kwargs["payload"] = parse(schema, data, error=error, message=message)
            return view(*args, **kwargs)

        return wrapper

    return decorator

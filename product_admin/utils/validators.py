from functools import wraps
from flask import request
from marshmallow import ValidationError as SchemaValidationError

from product_admin.utils.exceptions import ValidationError

FORM_MIMETYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def request_payload():
    """Return request fields from a form or a JSON body"""
    if request.mimetype in FORM_MIMETYPES:
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def flatten_messages(messages):
    """Collapse marshmallow's ``{field: [msg, ...]}`` into ``{field: msg}``"""
    flat = {}
    for field, errors in messages.items():
        if isinstance(errors, (list, tuple)) and errors:
            flat[field] = errors[0]
        else:
            flat[field] = errors
    return flat


def load_or_raise(schema, data, message="Validation error"):
    """Load ``data`` with ``schema``, reporting every failing field at once"""
    try:
        return schema.load(data)
    except SchemaValidationError as err:
        raise ValidationError(message, errors=flatten_messages(err.messages)) from err


def validate_schema(schema_class, message="Validation error"):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            request.validated_data = load_or_raise(schema_class(), request_payload(), message)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def validate_pagination(default_limit=10):
    """Validate pagination parameters"""
    page = request.args.get('page', 1, type=int)
    limit = request.args.get('limit', default_limit, type=int)

    if page < 1:
        page = 1
    if limit < 1:
        limit = default_limit

    return page, limit

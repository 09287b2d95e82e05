from flask import request
from pydantic import ValidationError as SchemaError
from estately.errors import ValidationError


def validate_json(schema):
    """Validate the JSON request body against a pydantic schema"""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    try:
        return schema.model_validate(data)
    except SchemaError as e:
        raise ValidationError.from_schema_error(e)


def validate_args(schema):
    """Validate query-string parameters against a pydantic schema"""
    try:
        return schema.model_validate(request.args.to_dict())
    except SchemaError as e:
        raise ValidationError.from_schema_error(e)


def clamp_limit(limit, default, maximum):
    """Page size within [1, maximum]; default when not supplied"""
    if limit is None:
        return default
    return max(1, min(limit, maximum))

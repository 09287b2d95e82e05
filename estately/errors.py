"""
API error types and their JSON rendering.

Every error the API returns on purpose is an ``ApiError``. Store failures are
raised as ``StoreError`` with a generic message; the underlying exception is
logged server-side only.
"""
from flask import jsonify, current_app
from pydantic import ValidationError as SchemaError
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Base class for errors rendered as ``{"error": message}``"""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'error': self.message}

    def response(self):
        """(body, status) pair for views and callbacks that return rather than raise"""
        return jsonify(self.to_dict()), self.status_code


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Validation failed'

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self):
        if self.errors:
            return {'error': self.message, 'errors': self.errors}
        return {'error': self.message}

    @classmethod
    def from_schema_error(cls, exc):
        """Build from a pydantic ValidationError, one entry per bad field"""
        errors = []
        for err in exc.errors():
            field = '.'.join(str(part) for part in err.get('loc', ()) if part != '__root__')
            message = err.get('msg', 'Invalid value')
            # pydantic prefixes custom validator messages
            if message.startswith('Value error, '):
                message = message[len('Value error, '):]
            errors.append({'field': field, 'message': message})
        return cls('Validation failed', errors)


class Unauthorized(ApiError):
    status_code = 401
    default_message = 'Access token required'


class Forbidden(ApiError):
    status_code = 403
    default_message = 'Forbidden'


class NotFoundError(ApiError):
    status_code = 404
    default_message = 'Not found'


class StoreError(ApiError):
    status_code = 500
    default_message = 'Internal server error'


class UpstreamError(ApiError):
    status_code = 502
    default_message = 'Upstream service failed'


class ServiceUnavailable(ApiError):
    status_code = 503
    default_message = 'Service unavailable'


def register_error_handlers(app, db):
    """Attach JSON error handlers to the application"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return error.response()

    @app.errorhandler(SchemaError)
    def handle_schema_error(error):
        return ValidationError.from_schema_error(error).response()

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(429)
    def ratelimit_handler(e):
        return jsonify({'error': 'Rate limit exceeded. Please try again later.'}), 429

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'error': e.description or e.name}), e.code

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        current_app.logger.error(f'Unhandled error: {error}')
        return jsonify({'error': 'Internal server error'}), 500

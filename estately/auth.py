"""
Bearer-token gate.

Tokens carry the user id as their subject. A request without a token is
rejected with 401; a token that is malformed, expired, signed with another key
or that names a user who no longer exists is rejected with 403.
"""
from flask import current_app
from flask_jwt_extended import create_access_token
from estately import db
from estately.errors import Forbidden, Unauthorized
from estately.models.user import User


def issue_token(user):
    """Issue an access token for the user (expiry set by JWT_ACCESS_TOKEN_EXPIRES)"""
    return create_access_token(identity=user, additional_claims={'email': user.email})


def register_jwt_callbacks(jwt):
    @jwt.user_identity_loader
    def user_identity_lookup(user):
        if isinstance(user, User):
            return str(user.id)
        return str(user)

    @jwt.user_lookup_loader
    def user_lookup_callback(_jwt_header, jwt_data):
        identity = jwt_data['sub']
        try:
            return db.session.get(User, int(identity))
        except (TypeError, ValueError):
            return None

    @jwt.unauthorized_loader
    def missing_token_callback(reason):
        return Unauthorized().response()

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        current_app.logger.info(f'Rejected token: {reason}')
        return Forbidden('Invalid or expired token').response()

    @jwt.expired_token_loader
    def expired_token_callback(_jwt_header, _jwt_data):
        return Forbidden('Invalid or expired token').response()

    @jwt.user_lookup_error_loader
    def user_lookup_error_callback(_jwt_header, jwt_data):
        return Forbidden('Invalid token').response()

from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from estately import db, limiter
from estately.errors import StoreError, Unauthorized
from estately.auth import issue_token
from estately.models.user import User
from estately.schemas import RegisterRequest, LoginRequest
from estately.utils.validators import validate_json

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
@limiter.limit("20 per hour")
def register():
    """Register a new user"""
    data = validate_json(RegisterRequest)

    try:
        if User.query.filter_by(email=data.email).first():
            return jsonify({'error': 'Email already registered'}), 400

        user = User(
            name=data.name,
            email=data.email,
            phone=data.phone,
        )
        user.set_password(data.password)

        db.session.add(user)
        db.session.commit()

    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'Email already registered'}), 400
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Registration failed')
        raise StoreError('Failed to register user')

    current_app.logger.info(f'Registered user {user.id}')

    return jsonify({
        'user': user.to_dict(),
        'token': issue_token(user)
    }), 201


@auth_bp.route('/login', methods=['POST'])
@limiter.limit("30 per hour")
def login():
    """Login user"""
    data = validate_json(LoginRequest)

    try:
        user = User.query.filter_by(email=data.email).first()
    except SQLAlchemyError:
        current_app.logger.exception('Login lookup failed')
        raise StoreError('Failed to login')

    if not user or not user.check_password(data.password):
        raise Unauthorized('Invalid email or password')

    current_app.logger.info(f'User {user.id} logged in')

    return jsonify({
        'user': user.to_dict(),
        'token': issue_token(user)
    }), 200


@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    """Get the current user"""
    return jsonify({'user': current_user.to_identity()}), 200

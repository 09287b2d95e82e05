from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately import db
from estately.errors import StoreError
from estately.services.favorites import add_favorite, list_favorites, remove_favorite

favorites_bp = Blueprint('favorites', __name__)


@favorites_bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
def get_favorites():
    """Get the caller's favorites, newest first, with listings inlined"""
    try:
        favorites = list_favorites(current_user.id)

        return jsonify({
            'favorites': [favorite.to_dict(include_listing=True) for favorite in favorites]
        }), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching favorites')
        raise StoreError('Failed to fetch favorites')


@favorites_bp.route('/<int:listing_id>', methods=['POST'])
@jwt_required()
def create_favorite(listing_id):
    """Add a listing to favorites (idempotent)"""
    try:
        favorite = add_favorite(current_user.id, listing_id)

        return jsonify({'favorite': favorite.to_dict()}), 201

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f'Error adding favorite {listing_id}')
        raise StoreError('Failed to add favorite')


@favorites_bp.route('/<int:listing_id>', methods=['DELETE'])
@jwt_required()
def delete_favorite(listing_id):
    """Remove a listing from favorites; succeeds whether or not it was saved"""
    try:
        remove_favorite(current_user.id, listing_id)

        return jsonify({'message': 'Favorite removed'}), 200

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f'Error removing favorite {listing_id}')
        raise StoreError('Failed to remove favorite')

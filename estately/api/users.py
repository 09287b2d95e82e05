from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately.errors import StoreError
from estately.models.listing import Listing
from estately.services.listing_filter import newest_first

users_bp = Blueprint('users', __name__)


@users_bp.route('/listings', methods=['GET'])
@jwt_required()
def get_my_listings():
    """Get every listing owned by the caller, any status"""
    try:
        listings = newest_first(Listing.query.filter_by(owner_id=current_user.id)).all()

        return jsonify({
            'listings': [listing.to_dict(include_owner=False) for listing in listings]
        }), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching user listings')
        raise StoreError('Failed to fetch listings')

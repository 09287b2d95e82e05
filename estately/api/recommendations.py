from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately.errors import StoreError
from estately.schemas import RecommendationQuery
from estately.services.recommendations import recommend_listings
from estately.utils.validators import clamp_limit, validate_args

recommendations_bp = Blueprint('recommendations', __name__)


@recommendations_bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
def get_recommendations():
    """Active listings matching the property types the caller has favorited"""
    params = validate_args(RecommendationQuery)
    limit = clamp_limit(params.limit,
                        current_app.config['DEFAULT_RECOMMENDATIONS'],
                        current_app.config['MAX_PAGE_SIZE'])

    try:
        listings = recommend_listings(current_user.id, limit)

        return jsonify({
            'recommendations': [listing.to_dict() for listing in listings]
        }), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching recommendations')
        raise StoreError('Failed to fetch recommendations')

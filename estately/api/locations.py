from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from estately import db
from estately.errors import StoreError
from estately.models.listing import Listing

locations_bp = Blueprint('locations', __name__)


@locations_bp.route('/', methods=['GET'], strict_slashes=False)
def get_locations():
    """Distinct cities and states that appear on listings"""
    try:
        cities = db.session.query(Listing.city).distinct().all()
        states = db.session.query(Listing.state).distinct().all()

        return jsonify({
            'cities': sorted(row[0] for row in cities if row[0]),
            'states': sorted(row[0] for row in states if row[0]),
        }), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching locations')
        raise StoreError('Failed to fetch locations')

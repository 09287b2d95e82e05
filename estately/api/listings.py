from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately import db
from estately.errors import NotFoundError, StoreError
from estately.models.listing import Listing, ListingImage
from estately.schemas import CompareRequest, ListingCreate, ListingQuery, ListingUpdate
from estately.services.comparator import compare_listings
from estately.services.listing_filter import ListingFilter, search_listings
from estately.utils.decorators import listing_owner_required
from estately.utils.validators import clamp_limit, validate_args, validate_json

listings_bp = Blueprint('listings', __name__)


@listings_bp.route('/', methods=['GET'], strict_slashes=False)
def get_listings():
    """Get listings with filters"""
    params = validate_args(ListingQuery)
    limit = clamp_limit(params.limit,
                        current_app.config['DEFAULT_PAGE_SIZE'],
                        current_app.config['MAX_PAGE_SIZE'])
    skip = params.skip or 0

    try:
        listings, total = search_listings(ListingFilter.from_query(params), limit, skip)

        return jsonify({
            'listings': [listing.to_dict() for listing in listings],
            'total': total,
            'limit': limit,
            'skip': skip,
        }), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching listings')
        raise StoreError('Failed to fetch listings')


@listings_bp.route('/<int:listing_id>', methods=['GET'])
def get_listing(listing_id):
    """Get a single listing by ID"""
    try:
        listing = db.session.get(Listing, listing_id)
    except SQLAlchemyError:
        current_app.logger.exception(f'Error fetching listing {listing_id}')
        raise StoreError('Failed to fetch listing')

    if not listing:
        raise NotFoundError('Listing not found')

    return jsonify(listing.to_dict()), 200


@listings_bp.route('/', methods=['POST'], strict_slashes=False)
@jwt_required()
def create_listing():
    """Create a new listing owned by the caller"""
    data = validate_json(ListingCreate)

    try:
        listing = Listing(
            title=data.title,
            description=data.description,
            price=data.price,
            currency=data.currency or 'INR',
            listing_type=data.listing_type,
            property_type=data.property_type,
            bedrooms=data.bedrooms,
            bathrooms=data.bathrooms,
            area_sq_ft=data.area_sq_ft,
            address=data.address,
            city=data.city,
            state=data.state,
            area=data.area,
            country=data.country or 'India',
            zip_code=data.zip_code,
            latitude=data.latitude,
            longitude=data.longitude,
            amenities=data.amenities,
            status='ACTIVE',
            owner_id=current_user.id,
        )
        listing.images = [ListingImage(url=url, caption=caption) for url, caption in data.image_rows()]

        db.session.add(listing)
        db.session.commit()

        return jsonify(listing.to_dict()), 201

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error creating listing')
        raise StoreError('Failed to create listing')


@listings_bp.route('/<int:listing_id>', methods=['PUT'])
@jwt_required()
@listing_owner_required
def update_listing(listing):
    """Partially update a listing (owner or admin)"""
    data = validate_json(ListingUpdate)

    try:
        for field, value in data.changes().items():
            setattr(listing, field, value)

        db.session.commit()

        return jsonify(listing.to_dict()), 200

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f'Error updating listing {listing.id}')
        raise StoreError('Failed to update listing')


@listings_bp.route('/<int:listing_id>', methods=['DELETE'])
@jwt_required()
@listing_owner_required
def delete_listing(listing):
    """Delete a listing (owner or admin)"""
    try:
        db.session.delete(listing)
        db.session.commit()

        return jsonify({'message': 'Listing deleted successfully'}), 200

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f'Error deleting listing {listing.id}')
        raise StoreError('Failed to delete listing')


@listings_bp.route('/compare', methods=['POST'])
def compare():
    """Fetch 2 or more listings for side-by-side comparison"""
    data = validate_json(CompareRequest)

    try:
        listings = compare_listings(data.listing_ids)

        return jsonify({'listings': [listing.to_dict() for listing in listings]}), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error comparing listings')
        raise StoreError('Failed to compare listings')

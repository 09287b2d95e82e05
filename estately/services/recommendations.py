from estately import db
from estately.models.favorite import Favorite
from estately.models.listing import Listing
from estately.services.listing_filter import newest_first


def favorite_property_types(user_id):
    """Distinct property types of the listings a user has favorited"""
    rows = (
        db.session.query(Listing.property_type)
        .join(Favorite, Favorite.listing_id == Listing.id)
        .filter(Favorite.user_id == user_id)
        .distinct()
        .all()
    )
    return {row[0] for row in rows}


def recommend_listings(user_id, limit):
    """
    Active listings the user does not own, restricted to the property types
    they have favorited. With no favorites this is simply the newest active
    listings from other owners.
    """
    query = Listing.query.filter(
        Listing.status == 'ACTIVE',
        Listing.owner_id != user_id,
    )

    property_types = favorite_property_types(user_id)
    if property_types:
        query = query.filter(Listing.property_type.in_(sorted(property_types)))

    return newest_first(query).limit(limit).all()

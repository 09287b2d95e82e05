from estately.errors import ValidationError
from estately.models.listing import Listing

MIN_COMPARE = 2


def compare_listings(listing_ids):
    """
    Full records for the requested listings. Ids that do not resolve are
    dropped; the result keeps the order the ids were given in.
    """
    if len(listing_ids) < MIN_COMPARE:
        raise ValidationError(f'At least {MIN_COMPARE} listing IDs required')

    listings = Listing.query.filter(Listing.id.in_(set(listing_ids))).all()
    by_id = {listing.id: listing for listing in listings}

    ordered = []
    seen = set()
    for listing_id in listing_ids:
        if listing_id in by_id and listing_id not in seen:
            ordered.append(by_id[listing_id])
            seen.add(listing_id)
    return ordered

from functools import wraps
from flask_jwt_extended import current_user
from estately import db
from estately.errors import Forbidden, NotFoundError
from estately.models.listing import Listing


def listing_owner_required(fn):
    """Decorator to require the listing's owner or an admin.

    Must sit under ``@jwt_required()``. The resolved listing is passed to the
    view as ``listing`` in place of ``listing_id``.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        listing_id = kwargs.pop('listing_id')
        listing = db.session.get(Listing, listing_id)

        if not listing:
            raise NotFoundError('Listing not found')

        if not listing.can_be_edited_by(current_user):
            raise Forbidden('Not authorized to modify this listing')

        return fn(*args, listing=listing, **kwargs)
    return wrapper

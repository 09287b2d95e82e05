"""
Translation of listing search parameters into a SQLAlchemy query.

``ListingFilter`` starts from "no filter" and each refinement is applied in a
fixed order, only when its parameter was supplied. The one exception is
``status``: when omitted it means "ACTIVE only", not "any status".
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from estately.models.listing import Listing

DEFAULT_STATUS = 'ACTIVE'


@dataclass
class ListingFilter:
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    property_type: Optional[str] = None
    listing_type: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    bedrooms: Optional[int] = None
    status: Optional[str] = None
    owner_id: Optional[int] = None

    @classmethod
    def from_query(cls, params):
        """Build from a validated ``ListingQuery``"""
        return cls(
            min_price=params.min_price,
            max_price=params.max_price,
            property_type=params.property_type,
            listing_type=params.listing_type,
            city=params.city,
            state=params.state,
            bedrooms=params.bedrooms,
            status=params.status,
            owner_id=params.user_id,
        )

    def apply(self, query):
        query = query.filter(Listing.status == (self.status or DEFAULT_STATUS))

        if self.min_price is not None:
            query = query.filter(Listing.price >= self.min_price)

        if self.max_price is not None:
            query = query.filter(Listing.price <= self.max_price)

        if self.property_type:
            query = query.filter(Listing.property_type == self.property_type)

        if self.listing_type:
            query = query.filter(Listing.listing_type == self.listing_type)

        # Partial, case-insensitive match so half-typed names still hit
        if self.city:
            query = query.filter(Listing.city.ilike(f'%{_escape_like(self.city)}%', escape='\\'))

        if self.state:
            query = query.filter(Listing.state.ilike(f'%{_escape_like(self.state)}%', escape='\\'))

        if self.bedrooms is not None:
            query = query.filter(Listing.bedrooms >= self.bedrooms)

        if self.owner_id is not None:
            query = query.filter(Listing.owner_id == self.owner_id)

        return query


def _escape_like(text):
    return text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def newest_first(query):
    return query.order_by(Listing.created_at.desc(), Listing.id.desc())


def search_listings(listing_filter, limit, skip):
    """Return (page of listings, total matching) for the filter"""
    query = listing_filter.apply(Listing.query)
    total = query.order_by(None).count()
    listings = newest_first(query).offset(skip).limit(limit).all()
    return listings, total

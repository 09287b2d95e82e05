from decimal import Decimal
from estately.models import Listing
from estately.schemas import ListingQuery
from estately.services.listing_filter import ListingFilter, search_listings


def ids(listings):
    return sorted(listing.id for listing in listings)


def test_empty_filter_is_active_only(app, make_user, make_listing):
    owner = make_user()
    active = make_listing(owner)
    make_listing(owner, status='RENTED')

    with app.app_context():
        assert ids(ListingFilter().apply(Listing.query).all()) == [active]


def test_from_query_maps_every_parameter():
    params = ListingQuery.model_validate({
        'minPrice': '10', 'maxPrice': '20', 'propertyType': 'PLOT', 'listingType': 'BUY',
        'city': 'Goa', 'state': 'Goa', 'bedrooms': '3', 'status': 'SOLD', 'userId': '7',
    })

    listing_filter = ListingFilter.from_query(params)

    assert listing_filter == ListingFilter(
        min_price=Decimal('10'), max_price=Decimal('20'), property_type='PLOT', listing_type='BUY',
        city='Goa', state='Goa', bedrooms=3, status='SOLD', owner_id=7,
    )


def test_blank_query_values_are_ignored():
    params = ListingQuery.model_validate({'minPrice': '', 'city': '  ', 'bedrooms': ''})

    assert ListingFilter.from_query(params) == ListingFilter()


def test_like_wildcards_in_city_are_literal(app, make_user, make_listing):
    owner = make_user()
    make_listing(owner, city='Navi Mumbai')
    literal = make_listing(owner, city='Odd_%City')

    with app.app_context():
        assert ids(ListingFilter(city='_%').apply(Listing.query).all()) == [literal]


def test_search_counts_whole_match_set(app, make_user, make_listing):
    owner = make_user()
    for n in range(4):
        make_listing(owner, bedrooms=n)

    with app.app_context():
        page, total = search_listings(ListingFilter(bedrooms=1), limit=2, skip=0)

    assert len(page) == 2
    assert total == 3

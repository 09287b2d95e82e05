from tests.utils import listing_ids


def test_single_id_is_a_validation_error(client, make_user, make_listing):
    listing_id = make_listing(make_user())

    resp = client.post('/api/listings/compare', json={'listingIds': [listing_id]})

    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'At least 2 listing IDs required'


def test_missing_body_is_a_validation_error(client):
    resp = client.post('/api/listings/compare', json={})

    assert resp.status_code == 400


def test_unknown_ids_are_dropped(client, make_user, make_listing):
    listing_id = make_listing(make_user())

    resp = client.post('/api/listings/compare', json={'listingIds': [listing_id, 9999]})

    assert resp.status_code == 200
    assert listing_ids(resp) == [listing_id]


def test_returns_full_records_in_request_order(client, make_user, make_listing):
    owner = make_user(name='Compare Owner')
    ids = [
        make_listing(owner, images=['https://img.example.com/a.jpg']),
        make_listing(owner, status='SOLD'),
        make_listing(owner),
        make_listing(owner),
    ]
    requested = [ids[2], ids[0], ids[3], ids[1]]

    resp = client.post('/api/listings/compare', json={'listingIds': requested})

    assert listing_ids(resp) == requested
    first_image_listing = resp.get_json()['listings'][1]
    assert first_image_listing['images'][0]['url'] == 'https://img.example.com/a.jpg'
    assert first_image_listing['owner']['name'] == 'Compare Owner'


def test_string_ids_are_accepted(client, make_user, make_listing):
    owner = make_user()
    a, b = make_listing(owner), make_listing(owner)

    resp = client.post('/api/listings/compare', json={'listingIds': [str(a), str(b)]})

    assert listing_ids(resp) == [a, b]

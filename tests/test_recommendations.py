from tests.utils import listing_ids


def recommendations(client, headers, query=''):
    return client.get(f'/api/recommendations{query}', headers=headers)


def test_cold_start_returns_newest_active_not_own(client, make_user, make_listing, auth_headers):
    me, other = make_user(), make_user()
    first = make_listing(other)
    make_listing(me)
    make_listing(other, status='SOLD')
    second = make_listing(other, property_type='VILLA')

    resp = recommendations(client, auth_headers(me))

    assert resp.status_code == 200
    assert listing_ids(resp, 'recommendations') == [second, first]


def test_favorited_property_type_restricts_results(client, make_user, make_listing, make_favorite, auth_headers):
    me, other = make_user(), make_user()
    liked = make_listing(other, property_type='VILLA')
    make_favorite(me, liked)
    make_listing(other, property_type='APARTMENT')
    make_listing(me, property_type='VILLA')
    make_listing(other, property_type='VILLA', status='INACTIVE')
    newest_villa = make_listing(other, property_type='VILLA')

    resp = recommendations(client, auth_headers(me))

    assert listing_ids(resp, 'recommendations') == [newest_villa, liked]


def test_several_favorited_types(client, make_user, make_listing, make_favorite, auth_headers):
    me, other = make_user(), make_user()
    villa = make_listing(other, property_type='VILLA')
    plot = make_listing(other, property_type='PLOT')
    make_favorite(me, villa)
    make_favorite(me, plot)
    make_listing(other, property_type='STUDIO')

    resp = recommendations(client, auth_headers(me))

    assert sorted(listing_ids(resp, 'recommendations')) == sorted([villa, plot])


def test_default_limit_is_ten(client, make_user, make_listing, auth_headers):
    me, other = make_user(), make_user()
    for n in range(12):
        make_listing(other, title=f'Listing {n:02d}')

    resp = recommendations(client, auth_headers(me))

    assert len(resp.get_json()['recommendations']) == 10


def test_explicit_limit(client, make_user, make_listing, auth_headers):
    me, other = make_user(), make_user()
    for n in range(3):
        make_listing(other, title=f'Listing {n:02d}')

    resp = recommendations(client, auth_headers(me), '?limit=2')

    assert len(resp.get_json()['recommendations']) == 2


def test_requires_auth(client):
    assert client.get('/api/recommendations').status_code == 401

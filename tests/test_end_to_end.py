from tests.utils import listing_ids


def test_register_login_create_search_delete(client):
    resp = client.post('/api/auth/register', json={
        'name': 'Neha Kapoor', 'email': 'neha@example.com', 'password': 'hunter22',
    })
    assert resp.status_code == 201

    resp = client.post('/api/auth/login', json={'email': 'neha@example.com', 'password': 'hunter22'})
    assert resp.status_code == 200
    headers = {'Authorization': f"Bearer {resp.get_json()['token']}"}

    resp = client.post('/api/listings', headers=headers, json={
        'title': 'Two bedroom apartment in Baner',
        'price': 5000000,
        'propertyType': 'APARTMENT',
        'listingType': 'SELL',
        'address': '18 Baner Road',
        'city': 'Pune',
        'state': 'Maharashtra',
    })
    assert resp.status_code == 201
    listing_id = resp.get_json()['id']

    resp = client.get('/api/listings?propertyType=APARTMENT')
    assert listing_id in listing_ids(resp)

    resp = client.delete(f'/api/listings/{listing_id}', headers=headers)
    assert resp.status_code == 200

    assert client.get(f'/api/listings/{listing_id}').status_code == 404


def test_health(client):
    resp = client.get('/api/health')

    assert resp.status_code == 200
    assert resp.get_json()['status'] == 'ok'


def test_unknown_route_is_json_404(client):
    resp = client.get('/api/does-not-exist')

    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Resource not found'}

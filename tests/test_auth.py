from datetime import timedelta
from flask_jwt_extended import create_access_token
from estately import db
from estately.models import User


def register(client, **overrides):
    payload = {'name': 'Asha Rao', 'email': 'Asha@Example.com', 'password': 'secret12'}
    payload.update(overrides)
    return client.post('/api/auth/register', json=payload)


def test_register_returns_user_and_token(client):
    resp = register(client)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body['token']
    assert body['user']['email'] == 'asha@example.com'
    assert body['user']['role'] == 'USER'
    assert 'password_hash' not in body['user']
    assert body['user']['monthlyBudget'] == 0
    assert body['user']['createdAt']
    assert 'created_at' not in body['user']


def test_register_rejects_duplicate_email(client):
    register(client)
    resp = register(client, email='asha@example.com')

    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Email already registered'


def test_register_reports_field_errors(client):
    resp = client.post('/api/auth/register', json={'name': 'A', 'email': 'nope', 'password': '123'})

    assert resp.status_code == 400
    fields = {err['field'] for err in resp.get_json()['errors']}
    assert {'name', 'email', 'password'} <= fields


def test_login_with_valid_credentials(client):
    register(client)
    resp = client.post('/api/auth/login', json={'email': 'asha@example.com', 'password': 'secret12'})

    assert resp.status_code == 200
    assert resp.get_json()['token']


def test_login_with_wrong_password(client):
    register(client)
    resp = client.post('/api/auth/login', json={'email': 'asha@example.com', 'password': 'wrong-one'})

    assert resp.status_code == 401
    assert resp.get_json()['error'] == 'Invalid email or password'


def test_me_returns_minimal_projection(client, make_user, auth_headers):
    user_id = make_user(name='Vikram', email='vikram@example.com', phone='9999999999')
    resp = client.get('/api/auth/me', headers=auth_headers(user_id))

    assert resp.status_code == 200
    assert resp.get_json()['user'] == {
        'id': user_id, 'email': 'vikram@example.com', 'name': 'Vikram', 'role': 'USER',
    }


def test_missing_token_is_unauthorized(client):
    resp = client.get('/api/auth/me')

    assert resp.status_code == 401
    assert resp.get_json()['error'] == 'Access token required'


def test_garbage_token_is_forbidden(client):
    resp = client.get('/api/auth/me', headers={'Authorization': 'Bearer not-a-jwt'})

    assert resp.status_code == 403


def test_expired_token_is_forbidden(app, client, make_user):
    user_id = make_user()
    with app.app_context():
        token = create_access_token(identity=str(user_id), expires_delta=timedelta(seconds=-10))

    resp = client.get('/api/auth/me', headers={'Authorization': f'Bearer {token}'})

    assert resp.status_code == 403


def test_token_for_deleted_user_is_forbidden(app, client, make_user, auth_headers):
    user_id = make_user()
    headers = auth_headers(user_id)
    with app.app_context():
        db.session.delete(db.session.get(User, user_id))
        db.session.commit()

    resp = client.get('/api/auth/me', headers=headers)

    assert resp.status_code == 403


def test_tokens_expire_after_seven_days(app):
    assert app.config['JWT_ACCESS_TOKEN_EXPIRES'] == timedelta(days=7)

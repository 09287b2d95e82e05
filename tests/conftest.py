import pytest
from flask_jwt_extended import create_access_token
from estately import create_app, db
from estately.models import User, Listing, ListingImage, Favorite, Expense


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    counter = {'n': 0}

    def _make_user(name='Test User', email=None, password='password123', role='USER', phone=None):
        counter['n'] += 1
        with app.app_context():
            user = User(
                name=name,
                email=email or f'user{counter["n"]}@example.com',
                phone=phone,
                role=role,
            )
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make_user


@pytest.fixture
def auth_headers(app):
    def _auth_headers(user_id):
        with app.app_context():
            token = create_access_token(identity=str(user_id))
        return {'Authorization': f'Bearer {token}'}
    return _auth_headers


@pytest.fixture
def make_listing(app):
    def _make_listing(owner_id, **overrides):
        fields = {
            'title': 'Sunny two bedroom flat',
            'description': 'Close to the metro',
            'price': 2500000,
            'listing_type': 'SELL',
            'property_type': 'APARTMENT',
            'bedrooms': 2,
            'bathrooms': 1,
            'address': '12 MG Road, Indiranagar',
            'city': 'Bengaluru',
            'state': 'Karnataka',
            'status': 'ACTIVE',
        }
        images = overrides.pop('images', [])
        fields.update(overrides)
        with app.app_context():
            listing = Listing(owner_id=owner_id, **fields)
            listing.images = [ListingImage(url=url) for url in images]
            db.session.add(listing)
            db.session.commit()
            return listing.id
    return _make_listing


@pytest.fixture
def make_favorite(app):
    def _make_favorite(user_id, listing_id):
        with app.app_context():
            favorite = Favorite(user_id=user_id, listing_id=listing_id)
            db.session.add(favorite)
            db.session.commit()
            return favorite.id
    return _make_favorite


@pytest.fixture
def make_expense(app):
    def _make_expense(user_id, **overrides):
        fields = {'title': 'Groceries', 'amount': 1200, 'kind': 'EXPENSE', 'category': 'Food'}
        fields.update(overrides)
        with app.app_context():
            expense = Expense(user_id=user_id, **fields)
            db.session.add(expense)
            db.session.commit()
            return expense.id
    return _make_expense


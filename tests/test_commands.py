from estately import db
from estately.models import User


def test_promote_admin(app, make_user):
    user_id = make_user(email='boss@example.com')

    result = app.test_cli_runner().invoke(args=['promote-admin', 'Boss@Example.com'])

    assert result.exit_code == 0
    assert 'boss@example.com is now an admin.' in result.output
    with app.app_context():
        assert db.session.get(User, user_id).role == 'ADMIN'


def test_promote_unknown_user_fails(app):
    result = app.test_cli_runner().invoke(args=['promote-admin', 'ghost@example.com'])

    assert result.exit_code != 0
    assert 'No user with email ghost@example.com' in result.output

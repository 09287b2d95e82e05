"""
Favorite ledger.

A favorite is nothing more than the existence of a (user, listing) row.
Adding is an insert-or-ignore on the unique pair so repeated or concurrent
adds leave exactly one row; removing deletes whatever matches.
"""
from datetime import datetime
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError
from estately import db
from estately.errors import NotFoundError
from estately.models.favorite import Favorite
from estately.models.listing import Listing


def _insert_ignore(values):
    """Native insert-or-ignore statement, or None where the dialect has none"""
    dialect = db.session.get_bind().dialect.name
    table = Favorite.__table__

    if dialect == 'postgresql':
        from sqlalchemy.dialects.postgresql import insert as pg_insert
        return pg_insert(table).values(**values).on_conflict_do_nothing(
            index_elements=['user_id', 'listing_id'])
    if dialect == 'sqlite':
        from sqlalchemy.dialects.sqlite import insert as sqlite_insert
        return sqlite_insert(table).values(**values).on_conflict_do_nothing(
            index_elements=['user_id', 'listing_id'])
    if dialect in ('mysql', 'mariadb'):
        return insert(table).values(**values).prefix_with('IGNORE')

    return None


def add_favorite(user_id, listing_id):
    if db.session.get(Listing, listing_id) is None:
        raise NotFoundError('Listing not found')

    values = {
        'user_id': user_id,
        'listing_id': listing_id,
        'created_at': datetime.utcnow(),
    }
    statement = _insert_ignore(values)

    if statement is not None:
        db.session.execute(statement)
        db.session.commit()
    else:
        try:
            db.session.execute(insert(Favorite.__table__).values(**values))
            db.session.commit()
        except IntegrityError:
            # uq_user_listing_favorite: the pair is already stored
            db.session.rollback()

    return Favorite.query.filter_by(user_id=user_id, listing_id=listing_id).one()


def remove_favorite(user_id, listing_id):
    """Delete any matching row; returns how many were removed"""
    removed = Favorite.query.filter_by(user_id=user_id, listing_id=listing_id).delete(
        synchronize_session=False)
    db.session.commit()
    return removed


def list_favorites(user_id):
    return (
        Favorite.query.filter_by(user_id=user_id)
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        .all()
    )

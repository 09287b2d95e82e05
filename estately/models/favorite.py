from estately import db
from datetime import datetime


class Favorite(db.Model):
    __tablename__ = 'favorites'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    listing_id = db.Column(db.Integer, db.ForeignKey('listings.id', ondelete='CASCADE'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # A user can favorite a listing only once
    __table_args__ = (db.UniqueConstraint('user_id', 'listing_id', name='uq_user_listing_favorite'),)

    listing = db.relationship('Listing', backref=db.backref('favorites', lazy='dynamic', cascade='all, delete-orphan'))
    user = db.relationship('User', backref=db.backref('favorites', lazy='dynamic', cascade='all, delete-orphan'))

    def to_dict(self, include_listing=False):
        data = {
            'id': self.id,
            'userId': self.user_id,
            'listingId': self.listing_id,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
        if include_listing and self.listing:
            data['listing'] = self.listing.to_dict()
        return data

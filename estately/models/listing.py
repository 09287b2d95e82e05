from datetime import datetime
from estately import db

LISTING_TYPES = ('BUY', 'SELL', 'RENT')
LISTING_STATUSES = ('ACTIVE', 'INACTIVE', 'SOLD', 'RENTED', 'PENDING')


def _decimal(value):
    return float(value) if value is not None else None


class Listing(db.Model):
    __tablename__ = 'listings'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)

    # Pricing
    price = db.Column(db.Numeric(14, 2), nullable=False)
    currency = db.Column(db.String(3), nullable=False, default='INR')
    listing_type = db.Column(db.Enum(*LISTING_TYPES, name='listing_type_enum'), nullable=False, index=True)

    # Details
    property_type = db.Column(db.String(50), nullable=False, index=True)
    bedrooms = db.Column(db.Integer, nullable=True)
    bathrooms = db.Column(db.Integer, nullable=True)
    area_sq_ft = db.Column(db.Numeric(12, 2), nullable=True)

    # Location
    address = db.Column(db.String(500), nullable=False)
    city = db.Column(db.String(100), nullable=False, index=True)
    state = db.Column(db.String(100), nullable=False, index=True)
    area = db.Column(db.String(255), nullable=True)
    country = db.Column(db.String(100), nullable=False, default='India')
    zip_code = db.Column(db.String(20), nullable=True)
    latitude = db.Column(db.Numeric(10, 8), nullable=True)
    longitude = db.Column(db.Numeric(11, 8), nullable=True)

    # Amenities (stored as JSON array)
    amenities = db.Column(db.JSON, default=list)

    status = db.Column(db.Enum(*LISTING_STATUSES, name='listing_status_enum'),
                       nullable=False, default='ACTIVE', index=True)

    # Relationships
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    images = db.relationship('ListingImage', backref='listing', lazy='selectin',
                             cascade='all, delete-orphan', order_by='ListingImage.id')

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def can_be_edited_by(self, user):
        """Owners and admins may change a listing"""
        return user.is_admin() or user.id == self.owner_id

    def to_dict(self, include_owner=True):
        data = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'price': _decimal(self.price),
            'currency': self.currency,
            'listingType': self.listing_type,
            'propertyType': self.property_type,
            'bedrooms': self.bedrooms,
            'bathrooms': self.bathrooms,
            'areaSqFt': _decimal(self.area_sq_ft),
            'address': self.address,
            'city': self.city,
            'state': self.state,
            'area': self.area,
            'country': self.country,
            'zipCode': self.zip_code,
            'latitude': _decimal(self.latitude),
            'longitude': _decimal(self.longitude),
            'amenities': self.amenities or [],
            'status': self.status,
            'ownerId': self.owner_id,
            'images': [image.to_dict() for image in self.images],
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

        if include_owner and self.owner:
            data['owner'] = self.owner.to_contact()

        return data

    def __repr__(self):
        return f'<Listing {self.title}>'


class ListingImage(db.Model):
    __tablename__ = 'listing_images'

    id = db.Column(db.Integer, primary_key=True)
    listing_id = db.Column(db.Integer, db.ForeignKey('listings.id', ondelete='CASCADE'),
                           nullable=False, index=True)
    url = db.Column(db.String(1000), nullable=False)
    caption = db.Column(db.String(255), nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'listingId': self.listing_id,
            'url': self.url,
            'caption': self.caption,
        }

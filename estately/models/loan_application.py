from estately import db
from datetime import datetime

LOAN_STATUSES = ('PENDING', 'APPROVED', 'REJECTED')


class LoanApplication(db.Model):
    __tablename__ = 'loan_applications'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    listing_id = db.Column(db.Integer, db.ForeignKey('listings.id', ondelete='SET NULL'), nullable=True)

    # Loan
    loan_amount = db.Column(db.Numeric(14, 2), nullable=False)
    tenure = db.Column(db.Integer, nullable=False)  # months
    purpose = db.Column(db.String(255), nullable=False)
    employment = db.Column(db.String(100), nullable=False)
    annual_income = db.Column(db.Numeric(14, 2), nullable=False)

    # Applicant contact
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    address = db.Column(db.String(500), nullable=False)

    status = db.Column(db.Enum(*LOAN_STATUSES, name='loan_status_enum'), nullable=False, default='PENDING')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    listing = db.relationship('Listing', backref=db.backref('loan_applications', lazy='dynamic'))

    def to_dict(self, include_listing=False):
        data = {
            'id': self.id,
            'userId': self.user_id,
            'listingId': self.listing_id,
            'loanAmount': float(self.loan_amount) if self.loan_amount is not None else None,
            'tenure': self.tenure,
            'purpose': self.purpose,
            'employment': self.employment,
            'annualIncome': float(self.annual_income) if self.annual_income is not None else None,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'address': self.address,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
        if include_listing:
            data['listing'] = self.listing.to_dict(include_owner=False) if self.listing else None
        return data

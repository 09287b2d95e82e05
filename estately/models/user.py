from datetime import datetime
from estately import db
import bcrypt

USER_ROLES = ('USER', 'ADMIN')


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=True)
    role = db.Column(db.Enum(*USER_ROLES, name='user_role_enum'), nullable=False, default='USER')

    # Expense tracker
    monthly_budget = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    listings = db.relationship('Listing', backref='owner', lazy='dynamic',
                               foreign_keys='Listing.owner_id', cascade='all, delete-orphan')
    loan_applications = db.relationship('LoanApplication', backref='user', lazy='dynamic',
                                        cascade='all, delete-orphan')
    expenses = db.relationship('Expense', backref='user', lazy='dynamic',
                               cascade='all, delete-orphan')

    def set_password(self, password):
        """Hash and set user password"""
        salt = bcrypt.gensalt(rounds=12)
        self.password_hash = bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    def check_password(self, password):
        """Check if provided password matches hash"""
        if not self.password_hash:
            return False
        return bcrypt.checkpw(password.encode('utf-8'), self.password_hash.encode('utf-8'))

    def is_admin(self):
        return self.role == 'ADMIN'

    def to_identity(self):
        """Minimal projection attached to authenticated requests"""
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role,
        }

    def to_contact(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'role': self.role,
            'monthlyBudget': float(self.monthly_budget or 0),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<User {self.email}>'

from estately import db
from datetime import datetime

EXPENSE_KINDS = ('INCOME', 'EXPENSE')
EXPENSE_CATEGORIES = ('Food', 'Travel', 'Shopping', 'Bills', 'Entertainment', 'Other')
PAYMENT_METHODS = ('Cash', 'Card', 'UPI', 'NetBanking')


class Expense(db.Model):
    __tablename__ = 'expenses'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    title = db.Column(db.String(100), nullable=False)
    # Always non-negative; direction lives in `kind`
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    kind = db.Column(db.Enum(*EXPENSE_KINDS, name='expense_kind_enum'), nullable=False, default='EXPENSE')
    category = db.Column(db.Enum(*EXPENSE_CATEGORIES, name='expense_category_enum'), nullable=False, default='Other')
    payment_method = db.Column(db.Enum(*PAYMENT_METHODS, name='payment_method_enum'), nullable=False, default='UPI')
    notes = db.Column(db.String(200), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (db.CheckConstraint('amount >= 0', name='ck_expense_amount_non_negative'),)

    def signed_amount(self):
        """Income is positive, spending negative"""
        amount = float(self.amount)
        return amount if self.kind == 'INCOME' else -amount

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'amount': float(self.amount) if self.amount is not None else None,
            'kind': self.kind,
            'category': self.category,
            'paymentMethod': self.payment_method,
            'notes': self.notes,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

from .user import User
from .listing import Listing, ListingImage
from .favorite import Favorite
from .loan_application import LoanApplication
from .expense import Expense

__all__ = ['User', 'Listing', 'ListingImage', 'Favorite', 'LoanApplication', 'Expense']

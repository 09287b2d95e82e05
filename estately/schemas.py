"""
Request schemas (pydantic).

Every endpoint that accepts input validates it through one of these models
before touching the database. Field aliases follow the JSON API (camelCase).
"""
from decimal import Decimal
from typing import ClassVar, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from estately.utils.sanitizers import sanitize_string

ListingType = Literal['BUY', 'SELL', 'RENT']
ListingStatus = Literal['ACTIVE', 'INACTIVE', 'SOLD', 'RENTED', 'PENDING']
ExpenseKind = Literal['INCOME', 'EXPENSE']
ExpenseCategory = Literal['Food', 'Travel', 'Shopping', 'Bills', 'Entertainment', 'Other']
PaymentMethod = Literal['Cash', 'Card', 'UPI', 'NetBanking']


class Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    # Free-text inputs stripped of HTML before validation
    sanitized_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode='before')
    @classmethod
    def clean_input(cls, data):
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                # Query strings and HTML forms send "" for untouched inputs
                if value.strip() == '':
                    value = None
                elif key in cls.sanitized_fields:
                    value = sanitize_string(value)
            cleaned[key] = value
        return cleaned


# Auth

class RegisterRequest(Schema):
    sanitized_fields = ('name', 'phone')

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, value):
        return value.lower()


class LoginRequest(Schema):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, value):
        return value.lower()


# Listings

class ImageInput(Schema):
    url: Optional[str] = None
    caption: Optional[str] = None


class ListingCreate(Schema):
    sanitized_fields = ('title', 'description', 'address', 'city', 'state', 'area', 'country')

    title: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    currency: Optional[str] = Field(None, max_length=3)
    listing_type: ListingType = Field(..., alias='listingType')
    property_type: str = Field(..., min_length=1, max_length=50, alias='propertyType')
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area_sq_ft: Optional[Decimal] = Field(None, ge=0, alias='areaSqFt')
    address: str = Field(..., min_length=5, max_length=500)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    area: Optional[str] = Field(None, max_length=255)
    country: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20, alias='zipCode')
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    amenities: List[str] = Field(default_factory=list)
    images: List[Union[str, ImageInput]] = Field(default_factory=list)

    def image_rows(self):
        """(url, caption) pairs with blank urls dropped"""
        rows = []
        for image in self.images:
            if isinstance(image, str):
                url, caption = image.strip(), None
            else:
                url, caption = (image.url or '').strip(), image.caption
            if url:
                rows.append((url, caption))
        return rows


_NOT_NULL_ON_UPDATE = ('title', 'price', 'currency', 'listing_type', 'property_type', 'status',
                       'address', 'city', 'state', 'country')


class ListingUpdate(Schema):
    sanitized_fields = ('title', 'description', 'address', 'city', 'state', 'area', 'country')

    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, max_length=3)
    listing_type: Optional[ListingType] = Field(None, alias='listingType')
    property_type: Optional[str] = Field(None, min_length=1, max_length=50, alias='propertyType')
    status: Optional[ListingStatus] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area_sq_ft: Optional[Decimal] = Field(None, ge=0, alias='areaSqFt')
    address: Optional[str] = Field(None, min_length=5, max_length=500)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    state: Optional[str] = Field(None, min_length=1, max_length=100)
    area: Optional[str] = Field(None, max_length=255)
    country: Optional[str] = Field(None, min_length=1, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20, alias='zipCode')
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    amenities: Optional[List[str]] = None

    @model_validator(mode='after')
    def required_columns_not_null(self):
        for name in _NOT_NULL_ON_UPDATE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f'{name} cannot be empty')
        return self

    def changes(self):
        """Only the fields the client actually sent"""
        data = self.model_dump(exclude_unset=True)
        if 'amenities' in data and data['amenities'] is None:
            data['amenities'] = []
        return data


class ListingQuery(Schema):
    min_price: Optional[Decimal] = Field(None, alias='minPrice')
    max_price: Optional[Decimal] = Field(None, alias='maxPrice')
    property_type: Optional[str] = Field(None, alias='propertyType')
    listing_type: Optional[ListingType] = Field(None, alias='listingType')
    city: Optional[str] = None
    state: Optional[str] = None
    bedrooms: Optional[int] = None
    status: Optional[ListingStatus] = None
    user_id: Optional[int] = Field(None, alias='userId')
    limit: Optional[int] = None
    skip: Optional[int] = Field(None, ge=0)


class RecommendationQuery(Schema):
    limit: Optional[int] = None


class CompareRequest(Schema):
    listing_ids: List[int] = Field(..., alias='listingIds')


# Loans

class LoanApplicationRequest(Schema):
    sanitized_fields = ('purpose', 'employment', 'name', 'phone', 'address')

    listing_id: Optional[int] = Field(None, alias='listingId')
    loan_amount: Decimal = Field(..., ge=0, alias='loanAmount')
    tenure: int = Field(..., ge=1)
    purpose: str = Field(..., min_length=1, max_length=255)
    employment: str = Field(..., min_length=1, max_length=100)
    annual_income: Decimal = Field(..., ge=0, alias='annualIncome')
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1, max_length=500)


# Expenses

class ExpenseCreate(Schema):
    sanitized_fields = ('title', 'notes')

    title: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., ge=0)
    kind: ExpenseKind = 'EXPENSE'
    category: ExpenseCategory = 'Other'
    payment_method: PaymentMethod = Field('UPI', alias='paymentMethod')
    notes: Optional[str] = Field(None, max_length=200)


class BudgetUpdate(Schema):
    monthly_budget: Decimal = Field(..., ge=0, alias='monthlyBudget')

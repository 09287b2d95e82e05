from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately import db
from estately.errors import NotFoundError, StoreError
from estately.models.listing import Listing
from estately.models.loan_application import LoanApplication
from estately.schemas import LoanApplicationRequest
from estately.utils.validators import validate_json

loans_bp = Blueprint('loans', __name__)


@loans_bp.route('/apply', methods=['POST'])
@jwt_required()
def apply_for_loan():
    """Submit a loan application"""
    data = validate_json(LoanApplicationRequest)

    try:
        if data.listing_id is not None and db.session.get(Listing, data.listing_id) is None:
            raise NotFoundError('Listing not found')

        application = LoanApplication(
            user_id=current_user.id,
            listing_id=data.listing_id,
            loan_amount=data.loan_amount,
            tenure=data.tenure,
            purpose=data.purpose,
            employment=data.employment,
            annual_income=data.annual_income,
            name=data.name,
            email=data.email,
            phone=data.phone,
            address=data.address,
            status='PENDING',
        )

        db.session.add(application)
        db.session.commit()

        current_app.logger.info(f'Loan application {application.id} submitted by user {current_user.id}')

        return jsonify({'loanApplication': application.to_dict()}), 201

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error creating loan application')
        raise StoreError('Failed to apply for loan')


@loans_bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
def get_my_loans():
    """Get the caller's loan applications, newest first"""
    try:
        loans = (
            LoanApplication.query.filter_by(user_id=current_user.id)
            .order_by(LoanApplication.created_at.desc(), LoanApplication.id.desc())
            .all()
        )

        return jsonify({'loans': [loan.to_dict(include_listing=True) for loan in loans]}), 200

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching loans')
        raise StoreError('Failed to fetch loans')

from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately import db
from estately.models.expense import Expense
from estately.schemas import BudgetUpdate, ExpenseCreate
from estately.utils.validators import validate_json

expenses_bp = Blueprint('expenses', __name__)


def _user_expenses(user_id):
    return Expense.query.filter_by(user_id=user_id).order_by(Expense.created_at.asc(), Expense.id.asc()).all()


def _expenses_response(message, user_id, status=200):
    return jsonify({
        'message': message,
        'success': True,
        'data': [expense.to_dict() for expense in _user_expenses(user_id)]
    }), status


@expenses_bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
def get_expenses():
    """Get the caller's transactions"""
    try:
        return _expenses_response('Fetched user expenses successfully', current_user.id)

    except SQLAlchemyError:
        current_app.logger.exception('Error fetching expenses')
        return jsonify({'success': False, 'error': 'Failed to fetch expenses'}), 500


@expenses_bp.route('/', methods=['POST'], strict_slashes=False)
@jwt_required()
def add_expense():
    """Record a transaction"""
    data = validate_json(ExpenseCreate)

    try:
        expense = Expense(
            user_id=current_user.id,
            title=data.title,
            amount=data.amount,
            kind=data.kind,
            category=data.category,
            payment_method=data.payment_method,
            notes=data.notes,
        )
        db.session.add(expense)
        db.session.commit()

        return _expenses_response('Expense added successfully', current_user.id, 201)

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error adding expense')
        return jsonify({'success': False, 'error': 'Failed to add expense'}), 500


@expenses_bp.route('/<int:expense_id>', methods=['DELETE'])
@jwt_required()
def delete_expense(expense_id):
    """Delete one of the caller's transactions"""
    try:
        expense = Expense.query.filter_by(id=expense_id, user_id=current_user.id).first()
        if not expense:
            return jsonify({'success': False, 'error': 'Expense not found'}), 404

        db.session.delete(expense)
        db.session.commit()

        return _expenses_response('Expense deleted successfully', current_user.id)

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f'Error deleting expense {expense_id}')
        return jsonify({'success': False, 'error': 'Failed to delete expense'}), 500


def _budget_response(user, message):
    return jsonify({
        'message': message,
        'success': True,
        'data': {'monthlyBudget': float(user.monthly_budget or 0)}
    }), 200


@expenses_bp.route('/budget', methods=['GET'])
@jwt_required()
def get_budget():
    """Get the caller's monthly budget"""
    return _budget_response(current_user, 'Fetched monthly budget successfully')


@expenses_bp.route('/budget', methods=['PUT'])
@jwt_required()
def set_budget():
    """Set the caller's monthly budget"""
    data = validate_json(BudgetUpdate)

    try:
        current_user.monthly_budget = data.monthly_budget
        db.session.commit()

        return _budget_response(current_user, 'Monthly budget updated successfully')

    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error updating monthly budget')
        return jsonify({'success': False, 'error': 'Failed to update monthly budget'}), 500

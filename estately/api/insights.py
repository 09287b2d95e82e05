from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from estately import limiter
from estately.models.expense import Expense
from estately.services.gemini import GeminiService, INSIGHT_SAMPLE_SIZE, build_insight_prompt

insights_bp = Blueprint('insights', __name__)


@insights_bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
@limiter.limit("30 per hour")
def get_insights():
    """Short AI-written tip based on the caller's recent transactions"""
    try:
        recent = (
            Expense.query.filter_by(user_id=current_user.id)
            .order_by(Expense.created_at.desc(), Expense.id.desc())
            .limit(INSIGHT_SAMPLE_SIZE)
            .all()
        )
    except SQLAlchemyError:
        current_app.logger.exception('Error loading expenses for insights')
        return jsonify({'success': False, 'error': 'Failed to generate AI insights'}), 500

    if not recent:
        return jsonify({
            'success': True,
            'message': 'No expenses found to analyze. Add some transactions first!'
        }), 200

    # Oldest first reads naturally in the prompt
    prompt = build_insight_prompt(reversed(recent))
    insight = GeminiService().generate_text(prompt)

    return jsonify({'success': True, 'data': insight}), 200

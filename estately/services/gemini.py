import requests
from flask import current_app
from estately.errors import ServiceUnavailable, UpstreamError

INSIGHT_SAMPLE_SIZE = 50


def _format_amount(value):
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}"


def build_insight_prompt(expenses):
    """Prompt for a short financial tip; income positive, spending negative"""
    lines = []
    for expense in expenses:
        lines.append(f'{expense.title}: ₹{_format_amount(expense.signed_amount())} ({expense.category or "Other"})')

    return (
        'Here is a list of my recent transactions '
        '(positive amounts are income, negative amounts are expenses):\n'
        + '\n'.join(lines)
        + '\n\nBased on these transactions, please provide a short, helpful financial '
        'insight or tip in about 3-4 sentences. Be encouraging and concise.'
    )


class GeminiService:
    """Google Gemini generateContent REST client"""

    def __init__(self):
        self.api_key = current_app.config.get('GEMINI_API_KEY', '')
        self.model = current_app.config.get('GEMINI_MODEL', 'gemini-1.5-flash')
        self.base_url = current_app.config.get('GEMINI_API_URL').rstrip('/')
        self.timeout = current_app.config.get('GEMINI_TIMEOUT', 30)

    def is_configured(self):
        return bool(self.api_key)

    def generate_text(self, prompt):
        if not self.is_configured():
            raise ServiceUnavailable('AI insights are not configured')

        url = f'{self.base_url}/models/{self.model}:generateContent'
        payload = {
            'contents': [{'parts': [{'text': prompt}]}]
        }

        try:
            response = requests.post(
                url,
                params={'key': self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            current_app.logger.error(f'Gemini request exception: {str(e)}')
            raise UpstreamError('Failed to generate AI insights')

        if response.status_code != 200:
            current_app.logger.error(f'Gemini error: {response.status_code} - {response.text}')
            raise UpstreamError('Failed to generate AI insights')

        try:
            candidates = response.json().get('candidates') or []
            parts = candidates[0]['content']['parts']
            return ''.join(part.get('text', '') for part in parts).strip()
        except (ValueError, KeyError, IndexError, TypeError) as e:
            current_app.logger.error(f'Gemini response could not be parsed: {str(e)}')
            raise UpstreamError('Failed to generate AI insights')

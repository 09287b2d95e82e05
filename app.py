#!/usr/bin/env python3
"""
Estately Backend Application Runner
"""
import atexit
import os
from estately import create_app, db
from estately.models import User, Listing, Favorite, LoanApplication, Expense

app = create_app()


@atexit.register
def close_store():
    with app.app_context():
        db.engine.dispose()


@app.shell_context_processor
def make_shell_context():
    return {
        'db': db,
        'User': User,
        'Listing': Listing,
        'Favorite': Favorite,
        'LoanApplication': LoanApplication,
        'Expense': Expense,
    }


if __name__ == '__main__':
    port = int(os.getenv('PORT', 3000))
    debug = os.getenv('FLASK_ENV') == 'development'
    app.run(host='0.0.0.0', port=port, debug=debug)

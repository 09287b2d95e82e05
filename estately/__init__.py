from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_talisman import Talisman
import logging
import os
from dotenv import load_dotenv
from werkzeug.middleware.proxy_fix import ProxyFix

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
limiter = Limiter(key_func=get_remote_address)


def create_app(config_name=None):
    from estately.config import config_by_name

    app = Flask(__name__)

    # Trust reverse proxy headers
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    # Configuration
    config_name = config_name or os.getenv('FLASK_ENV', 'default')
    app.config.from_object(config_by_name.get(config_name, config_by_name['default']))
    app.logger.setLevel(getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)

    from estately.auth import register_jwt_callbacks
    register_jwt_callbacks(jwt)

    # CORS configuration
    CORS(app, resources={
        r"/api/*": {
            "origins": app.config['FRONTEND_URL'].split(','),
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"]
        }
    })

    # Security headers (only in production)
    if config_name == 'production':
        Talisman(app, force_https=True, content_security_policy=None)

    # Register blueprints
    from estately.api.auth import auth_bp
    from estately.api.listings import listings_bp
    from estately.api.users import users_bp
    from estately.api.favorites import favorites_bp
    from estately.api.recommendations import recommendations_bp
    from estately.api.locations import locations_bp
    from estately.api.loans import loans_bp
    from estately.api.expenses import expenses_bp
    from estately.api.insights import insights_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(listings_bp, url_prefix='/api/listings')
    app.register_blueprint(users_bp, url_prefix='/api/user')
    app.register_blueprint(favorites_bp, url_prefix='/api/favorites')
    app.register_blueprint(recommendations_bp, url_prefix='/api/recommendations')
    app.register_blueprint(locations_bp, url_prefix='/api/locations')
    app.register_blueprint(loans_bp, url_prefix='/api/loans')
    app.register_blueprint(expenses_bp, url_prefix='/api/expenses')
    app.register_blueprint(insights_bp, url_prefix='/api/insights')

    # Error handlers
    from estately.errors import register_error_handlers
    register_error_handlers(app, db)

    from estately.commands import register_commands
    register_commands(app)

    # Health check endpoint
    @app.route('/api/health')
    def health_check():
        from datetime import datetime
        return {'status': 'ok', 'timestamp': datetime.utcnow().isoformat()}, 200

    # Create tables
    with app.app_context():
        from estately import models  # noqa: F401
        db.create_all()

    return app

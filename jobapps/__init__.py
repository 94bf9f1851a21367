"""Application factory for the job application tracker."""

import os
from flask import Flask
from config import config


def create_app(config_name=None, overrides=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    from jobapps.extensions import db, migrate, cors
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": "*"}})

    from jobapps.services.store import RecordStore
    app.extensions['record_store'] = RecordStore(
        lock_timeout=app.config['STORE_LOCK_TIMEOUT']
    )

    # Register blueprints
    from jobapps.api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    # Create tables if they don't exist
    with app.app_context():
        from jobapps import models  # noqa: F401
        db.create_all()

    return app

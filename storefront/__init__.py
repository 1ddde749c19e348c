"""
Storefront - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from storefront.config import Config
from storefront.errors import StorefrontError
from storefront.extensions import cors, db
from storefront.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'])

    # Register blueprints
    from storefront.admin import admin_bp
    from storefront.catalog import catalog_bp

    app.register_blueprint(catalog_bp, url_prefix='/api')
    app.register_blueprint(admin_bp, url_prefix='/admin')

    _register_error_handlers(app)

    # Create database tables
    os.makedirs(app.instance_path, exist_ok=True)
    with app.app_context():
        from storefront import models  # noqa: F401
        db.create_all()
        logger.info('Database ready at %s', db.engine.url.render_as_string(hide_password=True))

    return app


def _register_error_handlers(app):
    """Turn every failure into a ``{success, message}`` JSON body."""

    @app.errorhandler(StorefrontError)
    def handle_storefront_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'success': False, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error')
        return jsonify({'success': False, 'message': 'Internal error'}), 500

"""
Configuration settings for the Storefront catalog service
"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration"""

    # Database configuration (relative SQLite paths resolve inside the instance folder)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///storefront.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = int(os.environ.get('PORT') or 2022)
    # Comma separated list, or '*' for any origin
    CORS_ORIGINS = [o.strip() for o in os.environ['CORS_ORIGINS'].split(',')] \
        if os.environ.get('CORS_ORIGINS') else '*'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # ---------------------------------------------------------------------
    # Admin Credentials
    # The back office has a single administrator; the pair is compared
    # against these values and never stored in the database.
    # ---------------------------------------------------------------------
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'mysecurepass'

    # Admin session tokens
    ADMIN_SESSION_TTL_HOURS = int(os.environ.get('ADMIN_SESSION_TTL_HOURS') or 24)
    ADMIN_SESSION_TOKEN_BYTES = 32  # 256 bits, hex encoded


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'mysecurepass'
    LOG_LEVEL = 'WARNING'

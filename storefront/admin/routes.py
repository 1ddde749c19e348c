"""
Admin Routes

Login issues a token, logout revokes it and /session reports whether it is
still valid.
"""

from datetime import timedelta

from flask import current_app, jsonify, request

from storefront.admin import admin_bp
from storefront.admin.decorators import request_token
from storefront.errors import AuthenticationFailure, ValidationError
from storefront.extensions import db
from storefront.services import admin_login, admin_logout, verify_admin_session


@admin_bp.route('/login', methods=['POST'])
def login():
    """Exchange the admin credential pair for a session token."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    username = body.get('username')
    password = body.get('password')

    if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
        raise ValidationError('Please enter both username and password.')

    config = current_app.config
    result = admin_login(
        db.session,
        username,
        password,
        admin_username=config['ADMIN_USERNAME'],
        admin_password=config['ADMIN_PASSWORD'],
        ttl=timedelta(hours=config['ADMIN_SESSION_TTL_HOURS']),
        token_bytes=config['ADMIN_SESSION_TOKEN_BYTES'],
    )
    if not result['success']:
        raise AuthenticationFailure(result['message'])
    return jsonify(result)


@admin_bp.route('/logout', methods=['POST'])
def logout():
    return jsonify(admin_logout(db.session, request_token(allow_payload=True)))


@admin_bp.route('/session', methods=['GET', 'POST'])
def verify_session():
    return jsonify(verify_admin_session(db.session, request_token(allow_payload=True)))

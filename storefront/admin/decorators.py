"""
Admin Decorator
"""

from functools import wraps

from flask import request

from storefront.extensions import db
from storefront.services import require_admin_session


def request_token(allow_payload=False):
    """Pull the admin token from the request.

    The ``Authorization: Bearer`` header is always checked. With
    ``allow_payload`` a ``token`` field in the JSON body or query string is
    accepted too (logout and session checks).
    """
    header = request.headers.get('Authorization', '')
    scheme, _, credentials = header.partition(' ')
    if scheme.lower() == 'bearer' and credentials.strip():
        return credentials.strip()

    if allow_payload:
        body = request.get_json(silent=True)
        if isinstance(body, dict) and isinstance(body.get('token'), str):
            return body['token']
        return request.args.get('token', '')
    return ''


def admin_required(f):
    """Decorator to ensure the request carries a live admin token.

    Raises InvalidSession (401) before the view runs otherwise.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        require_admin_session(db.session, request_token())
        return f(*args, **kwargs)
    return wrapper

"""
Admin Session Services

Issue, verify and revoke admin tokens. The administrator is a single fixed
credential pair taken from configuration; only the tokens are persisted.
"""

import logging
import secrets
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from storefront.errors import InvalidSession
from storefront.models import AdminSession, utcnow

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid credentials'


def _encodable(value):
    """True when ``value`` can be stored, i.e. has no lone surrogates."""
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def _matches(supplied, expected):
    if not isinstance(supplied, str) or not isinstance(expected, str):
        return False
    return secrets.compare_digest(supplied.encode('utf-8', 'surrogatepass'),
                                  expected.encode('utf-8', 'surrogatepass'))


def _commit(store):
    try:
        store.commit()
    except Exception:
        store.rollback()
        raise


def admin_login(store, username, password, *, admin_username, admin_password,
                ttl=timedelta(hours=24), token_bytes=32):
    """Check the credential pair and mint a new session token.

    Args:
        store: SQLAlchemy session used to persist the token
        username, password: credentials supplied by the client
        admin_username, admin_password: the configured pair
        ttl: lifetime of the issued token
        token_bytes: random bytes in the token (hex encoded, so the token is
            twice as many characters)

    Returns:
        ``{'success': True, 'message': ..., 'token': ...}`` on a match,
        otherwise ``{'success': False, 'message': 'Invalid credentials'}``.
    """
    # Both comparisons always run so timing does not hint at which one failed.
    username_ok = _matches(username, admin_username)
    password_ok = _matches(password, admin_password)
    if not (username_ok and password_ok):
        logger.warning('Rejected admin login attempt')
        return {'success': False, 'message': INVALID_CREDENTIALS}

    now = utcnow()
    token = secrets.token_hex(token_bytes)
    store.add(AdminSession(token=token, created_at=now, expires_at=now + ttl))
    _commit(store)

    logger.info('Admin session issued, expires at %s', (now + ttl).isoformat())
    return {'success': True, 'message': 'Login successful', 'token': token}


def verify_admin_session(store, token, now=None):
    """Report whether ``token`` names a live session.

    Unknown, empty, malformed and expired tokens all come back as invalid.
    Nothing is written; verification does not extend the expiry.
    """
    if not isinstance(token, str) or not token or not _encodable(token):
        return {'isValid': False}

    try:
        admin_session = store.get(AdminSession, token)
    except SQLAlchemyError:
        logger.exception('Session verification failed')
        store.rollback()
        return {'isValid': False}

    if admin_session is None:
        return {'isValid': False}
    return {'isValid': admin_session.is_active(now)}


def require_admin_session(store, token):
    """Raise InvalidSession unless ``token`` verifies."""
    if not verify_admin_session(store, token)['isValid']:
        raise InvalidSession()


def admin_logout(store, token):
    """Delete the session row for ``token``. Absent tokens are not an error."""
    if isinstance(token, str) and token and _encodable(token):
        admin_session = store.get(AdminSession, token)
        if admin_session is not None:
            store.delete(admin_session)
            _commit(store)
            logger.info('Admin session revoked')

    return {'success': True, 'message': 'Logged out successfully'}

"""
Storefront Errors

Every failure the service reports is one of these. They are turned into a
``{"success": false, "message": ...}`` response at the HTTP boundary.
"""


class StorefrontError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    default_message = 'Internal error'

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(StorefrontError):
    """A field is missing, has the wrong type or is out of range."""
    status_code = 400
    default_message = 'Invalid input'


class NotFound(StorefrontError):
    status_code = 404
    default_message = 'Not found'


class AuthenticationFailure(StorefrontError):
    """Bad admin credentials. Never says which field was wrong."""
    status_code = 401
    default_message = 'Invalid credentials'


class InvalidSession(StorefrontError):
    """Admin token is absent, unknown or expired."""
    status_code = 401
    default_message = 'Invalid or expired session'

"""
Admin Blueprint

Token-based authentication for the back office. The token returned by
/admin/login is sent back as ``Authorization: Bearer <token>`` on every
product mutation.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from storefront.admin import routes  # noqa: E402, F401

"""
Catalog Blueprint

Public product listing for shoppers plus the admin-only product mutations.
"""

from flask import Blueprint

catalog_bp = Blueprint('catalog', __name__)

from storefront.catalog import routes  # noqa: E402, F401

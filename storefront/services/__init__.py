"""
Services Package

Exports all services for easy importing. Every service takes the storage
session as its first argument.
"""

from storefront.services.sessions import admin_login, admin_logout, verify_admin_session, require_admin_session
from storefront.services.products import (
    parse_product_payload,
    list_products,
    list_categories,
    get_product,
    create_product,
    update_product,
    delete_product,
)

__all__ = [
    'admin_login',
    'admin_logout',
    'verify_admin_session',
    'require_admin_session',
    'parse_product_payload',
    'list_products',
    'list_categories',
    'get_product',
    'create_product',
    'update_product',
    'delete_product',
]

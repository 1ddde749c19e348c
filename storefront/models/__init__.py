"""
Models Package

Exports all models for easy importing.
"""

from storefront.models.product import Product, utcnow
from storefront.models.session import AdminSession

__all__ = ['Product', 'AdminSession', 'utcnow']

"""
Product Services

Create, list, update and delete catalog products. Validation mirrors the
column constraints: names and categories are non-empty, price is positive and
stock is a non-negative integer.
"""

import logging
import math

from storefront.errors import NotFound, ValidationError
from storefront.models import Product, utcnow

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'price', 'stock_quantity', 'category')
OPTIONAL_TEXT_FIELDS = ('description', 'image_filename', 'instagram_handle')
# Largest value a 64-bit INTEGER column holds
MAX_STOCK_QUANTITY = 2 ** 63 - 1

EDITABLE_FIELDS = (
    'name',
    'description',
    'price',
    'stock_quantity',
    'image_filename',
    'category',
    'instagram_handle',
)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _label(field):
    if field == 'name':
        return 'Product name'
    return field.replace('_', ' ').capitalize()


def _storable(field, value):
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        raise ValidationError(f'{_label(field)} contains invalid characters')
    return value


def _clean_text(field, value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{_label(field)} is required')
    return _storable(field, value)


def _clean_optional_text(field, value):
    if value is not None and not isinstance(value, str):
        raise ValidationError(f'{field} must be a string or null')
    return value if value is None else _storable(field, value)


def _clean_price(value):
    if not _is_number(value):
        raise ValidationError('Price must be a number')
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise ValidationError('Price must be a number')
    if value <= 0:
        raise ValidationError('Price must be positive')
    return float(value)


def _clean_stock(value):
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError('Stock quantity must be an integer')
    if value < 0:
        raise ValidationError('Stock quantity must be non-negative')
    if value > MAX_STOCK_QUANTITY:
        raise ValidationError(f'Stock quantity must not exceed {MAX_STOCK_QUANTITY}')
    return value


def parse_product_payload(body, partial=False):
    """Validate a create (or, with ``partial``, an update) payload.

    Returns a dict holding only editable fields. Unknown keys are dropped.
    For creation, optional text fields that are missing become None; for a
    partial update only the keys present in ``body`` are returned.

    Raises:
        ValidationError: naming the first offending field
    """
    if not isinstance(body, dict):
        raise ValidationError('Request body must be a JSON object')

    if not partial:
        missing = [field for field in REQUIRED_FIELDS if field not in body]
        if missing:
            raise ValidationError(f'{_label(missing[0])} is required')

    data = {}
    for field in EDITABLE_FIELDS:
        if field not in body:
            if not partial and field in OPTIONAL_TEXT_FIELDS:
                data[field] = None
            continue

        value = body[field]
        if field in ('name', 'category'):
            data[field] = _clean_text(field, value)
        elif field == 'price':
            data[field] = _clean_price(value)
        elif field == 'stock_quantity':
            data[field] = _clean_stock(value)
        else:
            data[field] = _clean_optional_text(field, value)
    return data


def _commit(store):
    try:
        store.commit()
    except Exception:
        store.rollback()
        raise


def list_products(store, search=None, category=None):
    """All products in creation order, optionally filtered.

    Args:
        store: SQLAlchemy session
        search: case-insensitive term matched against name or description
        category: exact category name
    """
    query = store.query(Product)
    if category:
        query = query.filter(Product.category == category)
    products = query.order_by(Product.id).all()

    term = (search or '').strip().lower()
    if not term:
        return products
    return [
        p for p in products
        if term in p.name.lower() or (p.description and term in p.description.lower())
    ]


def list_categories(store):
    """Distinct categories in order of first appearance."""
    categories = []
    for (category,) in store.query(Product.category).order_by(Product.id):
        if category not in categories:
            categories.append(category)
    return categories


def get_product(store, product_id):
    product = store.get(Product, product_id)
    if product is None:
        raise NotFound(f'Product with ID {product_id} not found')
    return product


def create_product(store, body):
    """Validate ``body`` and store a new product. Not idempotent."""
    data = parse_product_payload(body)
    now = utcnow()
    product = Product(created_at=now, updated_at=now, **data)
    store.add(product)
    _commit(store)
    logger.info('Created product %s (%s)', product.id, product.name)
    return product


def update_product(store, product_id, body):
    """Overwrite only the supplied fields and refresh ``updated_at``."""
    changes = parse_product_payload(body, partial=True)
    product = get_product(store, product_id)
    for field, value in changes.items():
        setattr(product, field, value)
    product.updated_at = max(utcnow(), product.created_at)
    _commit(store)
    logger.info('Updated product %s fields=%s', product.id, sorted(changes))
    return product


def delete_product(store, product_id):
    product = get_product(store, product_id)
    store.delete(product)
    _commit(store)
    logger.info('Deleted product %s', product_id)
    return {'success': True, 'message': f'Product with ID {product_id} deleted successfully'}

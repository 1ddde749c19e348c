"""
Catalog Routes
"""

from flask import jsonify, request

from storefront.admin.decorators import admin_required
from storefront.catalog import catalog_bp
from storefront.extensions import db
from storefront.models import utcnow
from storefront.services import (
    create_product,
    delete_product,
    get_product,
    list_categories,
    list_products,
    update_product,
)


@catalog_bp.route('/health')
def healthcheck():
    return jsonify({'status': 'ok', 'timestamp': utcnow().isoformat()})


@catalog_bp.route('/products')
def products_list():
    """All products, optionally narrowed by ``q`` (name/description) and ``category``."""
    products = list_products(
        db.session,
        search=request.args.get('q'),
        category=request.args.get('category'),
    )
    return jsonify([p.to_dict() for p in products])


@catalog_bp.route('/products/categories')
def products_categories():
    return jsonify(list_categories(db.session))


@catalog_bp.route('/products/<int:product_id>')
def products_detail(product_id):
    return jsonify(get_product(db.session, product_id).to_dict())


@catalog_bp.route('/products', methods=['POST'])
@admin_required
def products_create():
    product = create_product(db.session, request.get_json(silent=True))
    return jsonify(product.to_dict()), 201


@catalog_bp.route('/products/<int:product_id>', methods=['PATCH', 'PUT'])
@admin_required
def products_update(product_id):
    """Partial update: fields missing from the body keep their values."""
    product = update_product(db.session, product_id, request.get_json(silent=True))
    return jsonify(product.to_dict())


@catalog_bp.route('/products/<int:product_id>', methods=['DELETE'])
@admin_required
def products_delete(product_id):
    return jsonify(delete_product(db.session, product_id))

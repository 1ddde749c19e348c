import pytest

from storefront.errors import NotFound, ValidationError
from storefront.models import Product
from storefront.services import (
    create_product,
    delete_product,
    get_product,
    list_categories,
    list_products,
    parse_product_payload,
    update_product,
)

WIDGET = {'name': 'Widget', 'price': 9.99, 'stock_quantity': 5, 'category': 'Tools'}


def test_create_widget_scenario(store):
    product = create_product(store, WIDGET)
    data = product.to_dict()

    assert data['id'] > 0
    assert data['name'] == 'Widget'
    assert data['price'] == 9.99
    assert data['stock_quantity'] == 5
    assert data['category'] == 'Tools'
    assert data['description'] is None
    assert data['image_filename'] is None
    assert data['instagram_handle'] is None
    assert data['created_at'] == data['updated_at']

    updated = update_product(store, product.id, {'stock_quantity': 0})
    assert updated.price == 9.99
    assert updated.stock_quantity == 0
    assert updated.updated_at >= updated.created_at


def test_create_then_read_back_round_trip(store):
    fields = {
        'name': 'Ceramic Mug',
        'description': 'Hand glazed, 350ml',
        'price': 18.5,
        'stock_quantity': 12,
        'image_filename': 'mug.jpg',
        'category': 'Kitchen',
        'instagram_handle': '@mugshop',
    }
    created = create_product(store, fields)
    store.expire_all()

    stored = get_product(store, created.id).to_dict()
    for key, value in fields.items():
        assert stored[key] == value


def test_update_leaves_unlisted_fields_unchanged(store):
    product = create_product(store, {**WIDGET, 'description': 'Steel', 'instagram_handle': '@tools'})
    before = product.to_dict()

    update_product(store, product.id, {'name': 'Gadget', 'description': None})
    after = get_product(store, product.id).to_dict()

    assert after['name'] == 'Gadget'
    assert after['description'] is None
    for key in ('price', 'stock_quantity', 'image_filename', 'category', 'instagram_handle', 'created_at'):
        assert after[key] == before[key]


def test_update_with_no_fields_only_touches_timestamp(store):
    product = create_product(store, WIDGET)
    updated = update_product(store, product.id, {})
    assert updated.name == 'Widget'
    assert updated.updated_at >= updated.created_at


def test_update_missing_product(store):
    with pytest.raises(NotFound) as exc:
        update_product(store, 999, {'name': 'Nope'})
    assert exc.value.message == 'Product with ID 999 not found'


def test_update_rejects_invalid_values(store):
    product = create_product(store, WIDGET)
    with pytest.raises(ValidationError):
        update_product(store, product.id, {'price': 0})
    assert get_product(store, product.id).price == 9.99


def test_delete_removes_from_listing(store):
    keep = create_product(store, WIDGET)
    gone = create_product(store, {**WIDGET, 'name': 'Spanner'})

    result = delete_product(store, gone.id)
    assert result == {'success': True, 'message': f'Product with ID {gone.id} deleted successfully'}
    assert [p.id for p in list_products(store)] == [keep.id]


def test_delete_missing_product(store):
    with pytest.raises(NotFound):
        delete_product(store, 424242)


def test_create_is_not_idempotent(store):
    first = create_product(store, WIDGET)
    second = create_product(store, WIDGET)
    assert first.id != second.id
    assert store.query(Product).count() == 2


def test_list_is_in_creation_order(store):
    names = ['Hammer', 'Anvil', 'Chisel']
    for name in names:
        create_product(store, {**WIDGET, 'name': name})
    assert [p.name for p in list_products(store)] == names


def test_list_filters_by_search_and_category(store):
    create_product(store, {**WIDGET, 'name': 'Red Scarf', 'category': 'Clothing'})
    create_product(store, {**WIDGET, 'name': 'Hat', 'description': 'Matches the red scarf', 'category': 'Clothing'})
    create_product(store, {**WIDGET, 'name': 'Red Hammer'})

    assert [p.name for p in list_products(store, search='RED')] == ['Red Scarf', 'Hat', 'Red Hammer']
    assert [p.name for p in list_products(store, search='red', category='Tools')] == ['Red Hammer']
    assert [p.name for p in list_products(store, category='Clothing')] == ['Red Scarf', 'Hat']
    assert list_products(store, search='  ') == list_products(store)
    assert list_products(store, search='nothing-like-this') == []


def test_list_categories_in_first_seen_order(store):
    for category in ('Tools', 'Garden', 'Tools', 'Kitchen'):
        create_product(store, {**WIDGET, 'category': category})
    assert list_categories(store) == ['Tools', 'Garden', 'Kitchen']


@pytest.mark.parametrize('missing,message', [
    ('name', 'Product name is required'),
    ('price', 'Price is required'),
    ('stock_quantity', 'Stock quantity is required'),
    ('category', 'Category is required'),
])
def test_create_requires_fields(store, missing, message):
    body = {k: v for k, v in WIDGET.items() if k != missing}
    with pytest.raises(ValidationError) as exc:
        create_product(store, body)
    assert exc.value.message == message
    assert store.query(Product).count() == 0


@pytest.mark.parametrize('field,value', [
    ('name', ''),
    ('name', '   '),
    ('name', None),
    ('category', ''),
    ('price', 0),
    ('price', -1.5),
    ('price', '9.99'),
    ('price', True),
    ('price', float('nan')),
    ('price', 10 ** 400),
    ('stock_quantity', -1),
    ('stock_quantity', 1.5),
    ('stock_quantity', '5'),
    ('stock_quantity', False),
    ('stock_quantity', 10 ** 30),
    ('stock_quantity', 2 ** 63),
    ('name', 'Widget \ud800'),
    ('description', 42),
    ('instagram_handle', ['@x']),
])
def test_create_rejects_invalid_values(store, field, value):
    with pytest.raises(ValidationError):
        create_product(store, {**WIDGET, field: value})


def test_parse_payload_drops_unknown_keys_and_ids():
    data = parse_product_payload({**WIDGET, 'id': 7, 'created_at': 'yesterday', 'colour': 'red'})
    assert set(data) == {
        'name', 'description', 'price', 'stock_quantity', 'image_filename', 'category', 'instagram_handle',
    }


def test_parse_partial_payload_keeps_only_supplied_fields():
    assert parse_product_payload({'stock_quantity': 3.0}, partial=True) == {'stock_quantity': 3}


def test_parse_payload_rejects_non_objects():
    with pytest.raises(ValidationError):
        parse_product_payload(None)
    with pytest.raises(ValidationError):
        parse_product_payload([WIDGET])


def test_stock_upper_bound_is_accepted(store):
    product = create_product(store, {**WIDGET, 'stock_quantity': 2 ** 63 - 1})
    assert get_product(store, product.id).stock_quantity == 2 ** 63 - 1


def test_oversized_price_reports_number_error(store):
    with pytest.raises(ValidationError) as exc:
        create_product(store, {**WIDGET, 'price': 10 ** 400})
    assert exc.value.message == 'Price must be a number'


class FailingStore:
    """Session stand-in whose commit fails with a non-database error."""

    def __init__(self):
        self.rolled_back = False

    def add(self, obj):
        pass

    def commit(self):
        raise OverflowError('Python int too large to convert to SQLite INTEGER')

    def rollback(self):
        self.rolled_back = True


def test_failed_commit_rolls_back():
    failing = FailingStore()
    with pytest.raises(OverflowError):
        create_product(failing, WIDGET)
    assert failing.rolled_back is True


def test_error_status_can_be_overridden():
    error = ValidationError('Too large', status_code=413)
    assert error.status_code == 413
    assert ValidationError().status_code == 400

import pytest

from storefront import create_app
from storefront.config import TestConfig
from storefront.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return db.session


@pytest.fixture()
def admin_token(client):
    r = client.post('/admin/login', json={'username': 'admin', 'password': 'mysecurepass'})
    assert r.status_code == 200
    return r.get_json()['token']


@pytest.fixture()
def auth_headers(admin_token):
    return {'Authorization': f'Bearer {admin_token}'}

import os
import pytest
from decimal import Decimal
from product_admin import create_app, db
from product_admin.config import TestingConfig
from product_admin.models.user import User
from product_admin.models.product import Product
from product_admin.models.category import Category
from product_admin.services.media_service import MediaUploader
from product_admin.utils.exceptions import UploadFailure

HOSTED_PREFIX = "https://res.cloudinary.com/demo-cloud/image/upload/v1700000000/product-management"


def hosted_url(name):
    return f"{HOSTED_PREFIX}/{name}.jpg"


class FakeMediaUploader(MediaUploader):
    """In-memory stand-in for Cloudinary that records every call"""

    def __init__(self):
        super().__init__()
        self.uploaded = []
        self.destroyed = []
        self.fail_on = set()
        self.fail_destroy = False

    def upload(self, source):
        label = getattr(source, "filename", source)
        if label in self.fail_on:
            raise UploadFailure(label, "Simulated upload failure")
        self.uploaded.append(label)
        name = os.path.splitext(os.path.basename(str(label)))[0] or "image"
        return hosted_url(f"{name}-{len(self.uploaded)}")

    def destroy(self, url):
        if self.fail_destroy:
            raise UploadFailure(url, "Media host unavailable")
        self.destroyed.append(url)


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)
    app.extensions["media_uploader"] = FakeMediaUploader()

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


@pytest.fixture
def media(app):
    """The fake media uploader installed on the app"""
    return app.extensions["media_uploader"]


# User fixtures
@pytest.fixture
def admin_user(app):
    """Create the dashboard user"""
    user = User(
        username="admin",
        name="Admin User",
        email="admin@example.com",
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


# Auth token fixtures
@pytest.fixture
def admin_token(client, admin_user):
    """Get authentication token"""
    response = client.post(
        "/api/auth/login", json={"username": "admin", "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["data"]["token"]


@pytest.fixture
def auth_headers(admin_token):
    """Authentication headers"""
    return {"Authorization": f"Bearer {admin_token}"}


# Data fixtures
@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(name="Electronics")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def product(app, category):
    """Create a test product with three hosted images"""
    product = Product(
        name="iPhone 15 Pro Max",
        price=Decimal("1199.99"),
        category=category.name,
        stock=10,
        images=[hosted_url("front"), hosted_url("back"), hosted_url("side")],
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture(name="hosted_url")
def hosted_url_fixture():
    """Builder for media references the fake uploader recognises"""
    return hosted_url

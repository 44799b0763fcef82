import pytest
from flask import request

from product_admin.schemas import CategorySchema
from product_admin.utils.exceptions import ValidationError
from product_admin.utils.helpers import pagination_to_dict
from product_admin.utils.validators import (
    flatten_messages,
    load_or_raise,
    request_payload,
    validate_pagination,
    validate_schema,
)


class TestValidators:
    """Test validator utilities"""

    def test_validate_pagination_default(self, app):
        """Test pagination with default values"""
        with app.test_request_context():
            assert validate_pagination() == (1, 10)
            assert validate_pagination(5) == (1, 5)

    def test_validate_pagination_custom(self, app):
        with app.test_request_context("/?page=3&limit=250"):
            assert validate_pagination() == (3, 250)

    def test_validate_pagination_invalid(self, app):
        with app.test_request_context("/?page=0&limit=abc"):
            assert validate_pagination(5) == (1, 5)

    def test_flatten_messages(self):
        assert flatten_messages({"name": ["too short", "other"], "_schema": "bad"}) == {
            "name": "too short",
            "_schema": "bad",
        }

    def test_load_or_raise(self):
        assert load_or_raise(CategorySchema(), {"name": "  Books "}) == {"name": "Books"}

        with pytest.raises(ValidationError) as exc_info:
            load_or_raise(CategorySchema(), {"name": "B"})
        assert exc_info.value.errors == {
            "name": "Category name is required and must be at least 2 characters"
        }

    def test_request_payload_form(self, app):
        with app.test_request_context("/", method="POST", data={"name": "Books"}):
            assert request_payload() == {"name": "Books"}

    def test_request_payload_without_body(self, app):
        with app.test_request_context("/", method="POST"):
            assert request_payload() == {}

    def test_validate_schema_decorator(self, app):
        @validate_schema(CategorySchema)
        def view():
            return request.validated_data

        with app.test_request_context("/", method="POST", json={"name": " Toys "}):
            assert view() == {"name": "Toys"}

        with app.test_request_context("/", method="POST", json={}):
            with pytest.raises(ValidationError):
                view()


class TestHelpers:
    """Test helper utilities"""

    def test_pagination_to_dict(self):
        class Page:
            page, pages, total, per_page = 2, 3, 12, 5

        assert pagination_to_dict(Page()) == {
            "currentPage": 2,
            "totalPages": 3,
            "totalItems": 12,
            "itemsPerPage": 5,
        }

from collections.abc import Mapping

from marshmallow import Schema, ValidationError, fields, validate, pre_load, EXCLUDE

from .user_schema import UserProfileSchema

NAME_LENGTH_MESSAGE = "Product name is required and must be at least 2 characters"
CATEGORY_NAME_MESSAGE = "Category name is required and must be at least 2 characters"


def validate_cents(value):
    if value.normalize().as_tuple().exponent < -2:
        raise ValidationError("Price can have at most 2 decimal places")


class TrimmedSchema(Schema):
    """Schema that strips surrounding whitespace from string input"""

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def strip_strings(self, data, **kwargs):
        if not isinstance(data, Mapping):
            return data
        return {
            key: value.strip() if isinstance(value, str) else value
            for key, value in data.items()
        }


class UserLoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))


class CategorySchema(TrimmedSchema):
    name = fields.Str(
        required=True,
        validate=[
            validate.Length(min=2, error=CATEGORY_NAME_MESSAGE),
            validate.Length(max=100, error="Category name cannot exceed 100 characters"),
        ],
        error_messages={"required": CATEGORY_NAME_MESSAGE},
    )


class ProductCreateSchema(TrimmedSchema):
    name = fields.Str(
        required=True,
        validate=[
            validate.Length(min=2, error=NAME_LENGTH_MESSAGE),
            validate.Length(max=200, error="Product name cannot exceed 200 characters"),
        ],
        error_messages={"required": NAME_LENGTH_MESSAGE},
    )
    price = fields.Decimal(
        required=True,
        validate=[
            validate.Range(min=0, min_inclusive=False, error="Price must be greater than 0"),
            validate_cents,
        ],
        error_messages={
            "required": "Price must be greater than 0",
            "invalid": "Price must be a number",
        },
    )
    category = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=100, error="Category is required"),
        error_messages={"required": "Category is required"},
    )
    stock = fields.Int(
        required=True,
        validate=validate.Range(min=0, error="Stock must be 0 or greater"),
        error_messages={
            "required": "Stock must be 0 or greater",
            "invalid": "Stock must be a whole number",
        },
    )


class ProductUpdateSchema(ProductCreateSchema):
    """Partial update: only supplied fields are validated"""

    @pre_load
    def strip_strings(self, data, **kwargs):
        data = super().strip_strings(data, **kwargs)
        if not isinstance(data, Mapping):
            return data
        # blank means "leave unchanged"
        return {key: value for key, value in data.items() if value not in (None, "")}

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("partial", True)
        super().__init__(*args, **kwargs)


__all__ = [
    "UserLoginSchema",
    "UserProfileSchema",
    "CategorySchema",
    "ProductCreateSchema",
    "ProductUpdateSchema",
]

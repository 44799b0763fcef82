from enum import Enum


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_CATEGORY = "DUPLICATE_CATEGORY"
    NOT_FOUND = "NOT_FOUND"
    CATEGORY_IN_USE = "CATEGORY_IN_USE"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    SERVER_ERROR = "SERVER_ERROR"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ProductSortField(str, Enum):
    NAME = "name"
    PRICE = "price"
    STOCK = "stock"
    CATEGORY = "category"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

from product_admin.enums import ErrorCode


class ApiError(Exception):
    """Base class for errors reported to API callers"""

    status_code = 400
    error_code = ErrorCode.SERVER_ERROR
    message = "Request failed"

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.errors = errors

    def to_dict(self):
        data = {
            "success": False,
            "message": self.message,
            "error": self.error_code.value,
        }
        if self.errors:
            data["errors"] = self.errors
        return data


class ValidationError(ApiError):
    status_code = 400
    error_code = ErrorCode.VALIDATION_ERROR
    message = "Validation error"


class InvalidCategory(ApiError):
    status_code = 400
    error_code = ErrorCode.INVALID_CATEGORY
    message = "Category does not exist"

    def __init__(self, message=None):
        super().__init__(message, errors={"category": "Invalid category"})


class DuplicateName(ApiError):
    status_code = 409
    error_code = ErrorCode.DUPLICATE_CATEGORY
    message = "Category with this name already exists"


class NotFound(ApiError):
    status_code = 404
    error_code = ErrorCode.NOT_FOUND
    message = "Resource not found"


class InUse(ApiError):
    status_code = 400
    error_code = ErrorCode.CATEGORY_IN_USE
    message = "Cannot delete category. Products are associated with this category"


class InvalidCredentials(ApiError):
    status_code = 401
    error_code = ErrorCode.INVALID_CREDENTIALS
    message = "Invalid username or password"


class Unauthenticated(ApiError):
    status_code = 401
    error_code = ErrorCode.UNAUTHORIZED
    message = "Not authorized"


class UploadFailure(Exception):
    """A single media upload or deletion failed"""

    def __init__(self, source, reason):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason

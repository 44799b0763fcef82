import traceback

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from product_admin.enums import ErrorCode
from product_admin.extensions import db
from product_admin.utils.exceptions import ApiError

HTTP_ERROR_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.NOT_FOUND,
    413: ErrorCode.PAYLOAD_TOO_LARGE,
}


def error_body(message, code, **extra):
    body = {"success": False, "message": message, "error": code.value}
    body.update(extra)
    return body


def register_error_handlers(app):
    """Register error handlers"""

    def server_error(error):
        db.session.rollback()
        app.logger.error(f"Unhandled exception: {error}", exc_info=error)
        extra = {}
        if app.debug or app.config.get("EXPOSE_ERROR_DETAILS"):
            extra["details"] = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        return jsonify(error_body("Server error", ErrorCode.SERVER_ERROR, **extra)), 500

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify(error_body("Route not found", ErrorCode.NOT_FOUND)), 404

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        code = HTTP_ERROR_CODES.get(error.code)
        if code is None:
            code = ErrorCode.SERVER_ERROR if error.code >= 500 else ErrorCode.VALIDATION_ERROR
        return jsonify(error_body(error.description, code)), error.code

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        return server_error(error)

    @app.errorhandler(Exception)
    def handle_exception(error):
        return server_error(error)

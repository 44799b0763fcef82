import logging
from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS
from .extensions import db, migrate, jwt, ma, media
from .config import Config
from product_admin.commands import register_commands
from product_admin.utils.error_handlers import register_error_handlers
from product_admin.utils.exceptions import Unauthenticated
from product_admin.routes import register_blueprints

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)
    media.init_app(app)
    CORS(app, origins=app.config["FRONTEND_URL"], supports_credentials=True)

    register_blueprints(app)
    register_error_handlers(app)
    register_jwt_callbacks()
    register_commands(app)

    @app.route("/api/health")
    def health():
        return {
            "success": True,
            "message": "Server is running!",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }, 200

    return app


def register_jwt_callbacks():
    """Every token problem is reported as 401 UNAUTHORIZED"""
    from product_admin.models.user import User

    def unauthorized(message):
        return jsonify(Unauthenticated(message).to_dict()), 401

    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_payload):
        return db.session.get(User, jwt_payload["sub"])

    @jwt.user_lookup_error_loader
    def user_not_found_callback(jwt_header, jwt_payload):
        return unauthorized("User not found")

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return unauthorized("Token has expired")

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return unauthorized("Invalid or expired token")

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return unauthorized("Not authorized, no token provided")

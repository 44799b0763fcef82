import os
from datetime import timedelta
from urllib.parse import quote_plus

BASEDIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _database_uri():
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    db_user = os.getenv("DB_USER")
    db_password = quote_plus(os.getenv("DB_PASSWORD", ""))
    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")
    db_name = os.getenv("DB_NAME", "productmanagement")
    return (
        f"postgresql+psycopg2://{db_user}:{db_password}"
        f"@{db_host}:{db_port}/{db_name}"
    )


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "secret")

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "jwt-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv("JWT_EXPIRE_HOURS", 24)))
    JWT_TOKEN_LOCATION = ["headers"]

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # Media host
    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")
    MEDIA_FOLDER = os.getenv("MEDIA_FOLDER", "product-management")
    MEDIA_UPLOAD_TIMEOUT = float(os.getenv("MEDIA_UPLOAD_TIMEOUT", 30))

    MAX_CONTENT_LENGTH = 50 * 1024 * 1024
    MAX_PRODUCT_IMAGES = 10

    CATEGORIES_PER_PAGE = 10
    PRODUCTS_PER_PAGE = 5

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    EXPOSE_ERROR_DETAILS = os.getenv("EXPOSE_ERROR_DETAILS", "False") == "True"


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-jwt-secret"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)
    CLOUDINARY_CLOUD_NAME = "demo-cloud"
    CLOUDINARY_API_KEY = "123456789"
    CLOUDINARY_API_SECRET = "test-api-secret"
    EXPOSE_ERROR_DETAILS = False

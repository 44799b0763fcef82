from product_admin.routes.auth import auth_bp
from product_admin.routes.categories import category_bp
from product_admin.routes.products import product_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(category_bp, url_prefix='/api/categories')
    app.register_blueprint(product_bp, url_prefix='/api/products')

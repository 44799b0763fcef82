from .user import User
from .category import Category
from .product import Product

__all__ = [
    "User",
    "Category",
    "Product",
]

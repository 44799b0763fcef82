from product_admin.models.base import BaseModel
from product_admin.extensions import db


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(100), unique=True, nullable=False, index=True)

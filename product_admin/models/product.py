from product_admin.models.base import BaseModel
from product_admin.extensions import db


class Product(BaseModel):
    __tablename__ = "products"
    __table_args__ = (
        db.CheckConstraint("price > 0", name="ck_products_price_positive"),
        db.CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    name = db.Column(db.String(200), nullable=False, index=True)
    price = db.Column(db.Numeric(12, 2), nullable=False)
    # Category is referenced by name; renaming a category does not cascade here.
    category = db.Column(db.String(100), nullable=False, index=True)
    stock = db.Column(db.Integer, default=0, nullable=False)
    images = db.Column(db.JSON, default=list, nullable=False)

    def to_dict(self):
        data = super().to_dict()
        data["price"] = float(self.price)
        data["images"] = list(self.images or [])
        return data

import logging

from flask import current_app

from product_admin.enums import ProductSortField, SortOrder
from product_admin.extensions import db
from product_admin.models.category import Category
from product_admin.models.product import Product
from product_admin.schemas import ProductCreateSchema, ProductUpdateSchema
from product_admin.services.image_changes import NewImages, NoChange, ReplaceUrls
from product_admin.utils.exceptions import (
    InvalidCategory,
    NotFound,
    UploadFailure,
    ValidationError,
)
from product_admin.utils.validators import load_or_raise

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    ProductSortField.NAME: Product.name,
    ProductSortField.PRICE: Product.price,
    ProductSortField.STOCK: Product.stock,
    ProductSortField.CATEGORY: Product.category,
    ProductSortField.CREATED_AT: Product.created_at,
    ProductSortField.UPDATED_AT: Product.updated_at,
}


def media_uploader():
    return current_app.extensions["media_uploader"]


class ProductService:
    """Product listing, mutation and image reconciliation"""

    @staticmethod
    def search_products(search: str = None, category: str = None, sort_by: str = "name",
                        sort_order: str = "asc", page: int = 1, per_page: int = 5):
        """Filtered, sorted page of products"""
        query = Product.query

        if search:
            query = query.filter(Product.name.icontains(search, autoescape=True))

        if category and category != "all":
            query = query.filter(Product.category == category)

        return query.order_by(*ProductService._ordering(sort_by, sort_order)).paginate(
            page=page, per_page=per_page, error_out=False
        )

    @staticmethod
    def get_product_by_id(product_id: str) -> Product:
        product = db.session.get(Product, product_id)
        if not product:
            raise NotFound("Product not found")
        return product

    @staticmethod
    def create_product(data: dict, image_changes=NoChange()):
        """Validate, upload images, persist. Returns ``(product, warnings)``"""
        fields = load_or_raise(ProductCreateSchema(), data)
        ProductService._ensure_category_exists(fields["category"])

        if isinstance(image_changes, ReplaceUrls):
            # a new product may only reference images already on the media host
            image_changes = NewImages(keep=tuple(
                url.strip() for url in image_changes.urls if isinstance(url, str) and url.strip()
            ))
        ProductService._check_image_count(image_changes)

        warnings = []
        images = ProductService._resolve_images(image_changes, warnings)

        product = Product(
            name=fields["name"],
            price=fields["price"],
            category=fields["category"],
            stock=fields["stock"],
            images=images if images is not None else [],
        ).save()

        logger.info(f"Created product {product.id} with {len(product.images)} images")
        return product, warnings

    @staticmethod
    def update_product(product_id: str, data: dict, image_changes=NoChange()):
        """Partial update. Images are rebuilt only when the request describes them"""
        product = ProductService.get_product_by_id(product_id)

        fields = load_or_raise(ProductUpdateSchema(), data)
        if "category" in fields:
            ProductService._ensure_category_exists(fields["category"])
        ProductService._check_image_count(image_changes)

        warnings = []
        images = ProductService._resolve_images(image_changes, warnings)

        for key, value in fields.items():
            setattr(product, key, value)
        if images is not None:
            product.images = images

        db.session.commit()

        logger.info(f"Updated product {product.id} ({len(product.images)} images)")
        return product, warnings

    @staticmethod
    def delete_product(product_id: str):
        """Delete product; media cleanup is best effort"""
        product = ProductService.get_product_by_id(product_id)

        uploader = media_uploader()
        for url in list(product.images or []):
            try:
                uploader.destroy(url)
            except UploadFailure as e:
                logger.error(f"Error deleting image {url}: {e.reason}")

        product.delete()

        logger.info(f"Deleted product {product_id}")

    @staticmethod
    def _ordering(sort_by, sort_order):
        try:
            column = SORT_COLUMNS[ProductSortField(sort_by)]
            order = SortOrder(sort_order)
        except ValueError:
            column, order = Product.name, SortOrder.ASC

        clause = column.desc() if order is SortOrder.DESC else column.asc()
        return clause, Product.id.asc()

    @staticmethod
    def _ensure_category_exists(name: str):
        if not Category.query.filter_by(name=name).first():
            raise InvalidCategory()

    @staticmethod
    def _check_image_count(image_changes):
        """Reject requests that would exceed the image limit before uploading anything"""
        uploader = media_uploader()

        if isinstance(image_changes, NewImages):
            count = len([f for f in image_changes.files if _is_image(f)])
            count += len([url for url in image_changes.keep or () if uploader.is_hosted(url)])
        elif isinstance(image_changes, ReplaceUrls):
            count = len([url for url in image_changes.urls if isinstance(url, str) and url.strip()])
        else:
            return

        limit = current_app.config["MAX_PRODUCT_IMAGES"]
        if count > limit:
            raise ValidationError(
                errors={"images": f"Maximum {limit} images allowed per product"}
            )

    @staticmethod
    def _resolve_images(image_changes, warnings):
        """New image list for the request, or None to keep the stored one"""
        if isinstance(image_changes, ReplaceUrls):
            return ProductService._rehost_urls(image_changes.urls, warnings)

        if isinstance(image_changes, NewImages):
            images = ProductService._upload_files(image_changes.files, warnings)
            uploader = media_uploader()
            for url in image_changes.keep or ():
                if uploader.is_hosted(url):
                    images.append(url)
                else:
                    logger.warning(f"Dropping image reference not hosted by media uploader: {url}")
            return images

        return None

    @staticmethod
    def _upload_files(files, warnings):
        uploader = media_uploader()
        images = []
        for file in files:
            if not _is_image(file):
                logger.info(f"Skipping non-image upload {file.filename} ({file.mimetype})")
                continue
            try:
                images.append(uploader.upload(file))
            except UploadFailure as e:
                logger.error(f"Error uploading file {file.filename}: {e.reason}")
                warnings.append({"image": file.filename, "reason": e.reason})
        return images

    @staticmethod
    def _rehost_urls(urls, warnings):
        uploader = media_uploader()
        images = []
        for url in urls:
            if not isinstance(url, str) or not url.strip():
                continue
            url = url.strip()
            if uploader.is_hosted(url):
                images.append(url)
            elif url.startswith(("http://", "https://")):
                try:
                    images.append(uploader.upload(url))
                except UploadFailure as e:
                    logger.error(f"Error processing image URL {url}: {e.reason}")
                    warnings.append({"image": url, "reason": e.reason})
            else:
                logger.warning(f"Skipping image entry that is not an absolute URL: {url}")
        return images


def _is_image(file) -> bool:
    return bool(file.mimetype) and file.mimetype.startswith("image/")

from sqlalchemy.exc import IntegrityError

from product_admin.extensions import db
from product_admin.models.category import Category
from product_admin.models.product import Product
from product_admin.utils.exceptions import DuplicateName, InUse, NotFound


class CategoryService:
    """Category CRUD. Names arrive already trimmed and validated"""

    @staticmethod
    def search_categories(search: str = None, page: int = 1, per_page: int = 10):
        query = Category.query

        if search:
            query = query.filter(Category.name.icontains(search, autoescape=True))

        return query.order_by(Category.name.asc(), Category.id.asc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    @staticmethod
    def get_category_by_id(category_id: str) -> Category:
        category = db.session.get(Category, category_id)
        if not category:
            raise NotFound("Category not found")
        return category

    @staticmethod
    def create_category(name: str) -> Category:
        if Category.query.filter_by(name=name).first():
            raise DuplicateName()

        category = Category(name=name)
        db.session.add(category)
        CategoryService._commit_unique()
        return category

    @staticmethod
    def update_category(category_id: str, name: str) -> Category:
        category = CategoryService.get_category_by_id(category_id)

        duplicate = Category.query.filter(
            Category.name == name, Category.id != category.id
        ).first()
        if duplicate:
            raise DuplicateName()

        category.name = name
        CategoryService._commit_unique()
        return category

    @staticmethod
    def delete_category(category_id: str):
        category = CategoryService.get_category_by_id(category_id)

        if Product.query.filter_by(category=category.name).first():
            raise InUse()

        category.delete()

    @staticmethod
    def _commit_unique():
        # the unique index catches inserts that raced past the lookup above
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise DuplicateName() from e

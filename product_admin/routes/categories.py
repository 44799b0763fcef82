from flask import Blueprint, current_app, request, jsonify
from flask_jwt_extended import jwt_required
from product_admin.services.category_service import CategoryService
from product_admin.schemas import CategorySchema
from product_admin.utils.helpers import pagination_to_dict
from product_admin.utils.validators import validate_schema, validate_pagination

category_bp = Blueprint("categories", __name__)


@category_bp.route("", methods=["GET"])
@jwt_required()
def get_categories():
    """List categories"""
    search = request.args.get("search")
    page, limit = validate_pagination(current_app.config["CATEGORIES_PER_PAGE"])

    pagination = CategoryService.search_categories(search=search, page=page, per_page=limit)

    return (
        jsonify(
            {
                "success": True,
                "data": {
                    "categories": [c.to_dict() for c in pagination.items],
                    "pagination": pagination_to_dict(pagination),
                },
            }
        ),
        200,
    )


@category_bp.route("/<category_id>", methods=["GET"])
@jwt_required()
def get_category(category_id):
    category = CategoryService.get_category_by_id(category_id)
    return jsonify({"success": True, "data": category.to_dict()}), 200


@category_bp.route("", methods=["POST"])
@jwt_required()
@validate_schema(CategorySchema, message="Category name is required and must be at least 2 characters")
def create_category():
    category = CategoryService.create_category(request.validated_data["name"])
    return (
        jsonify(
            {
                "success": True,
                "message": "Category created successfully",
                "data": category.to_dict(),
            }
        ),
        201,
    )


@category_bp.route("/<category_id>", methods=["PUT"])
@jwt_required()
@validate_schema(CategorySchema, message="Category name is required and must be at least 2 characters")
def update_category(category_id):
    category = CategoryService.update_category(category_id, request.validated_data["name"])
    return (
        jsonify(
            {
                "success": True,
                "message": "Category updated successfully",
                "data": category.to_dict(),
            }
        ),
        200,
    )


@category_bp.route("/<category_id>", methods=["DELETE"])
@jwt_required()
def delete_category(category_id):
    CategoryService.delete_category(category_id)
    return jsonify({"success": True, "message": "Category deleted successfully"}), 200

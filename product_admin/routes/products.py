from flask import Blueprint, current_app, request, jsonify
from flask_jwt_extended import jwt_required
from product_admin.services.image_changes import parse_image_changes
from product_admin.services.product_service import ProductService
from product_admin.utils.helpers import pagination_to_dict, product_response
from product_admin.utils.validators import request_payload, validate_pagination

product_bp = Blueprint("products", __name__)


@product_bp.route("", methods=["GET"])
@jwt_required()
def get_products():
    """List products with search, category filter, sorting and pagination"""
    page, limit = validate_pagination(current_app.config["PRODUCTS_PER_PAGE"])

    pagination = ProductService.search_products(
        search=request.args.get("search"),
        category=request.args.get("category"),
        sort_by=request.args.get("sortBy", "name"),
        sort_order=request.args.get("sortOrder", "asc"),
        page=page,
        per_page=limit,
    )

    return (
        jsonify(
            {
                "success": True,
                "data": {
                    "products": [p.to_dict() for p in pagination.items],
                    "pagination": pagination_to_dict(pagination),
                },
            }
        ),
        200,
    )


@product_bp.route("/<product_id>", methods=["GET"])
@jwt_required()
def get_product(product_id):
    product = ProductService.get_product_by_id(product_id)
    return jsonify({"success": True, "data": product.to_dict()}), 200


@product_bp.route("", methods=["POST"])
@jwt_required()
def create_product():
    """Create product from a multipart form or a JSON body"""
    product, warnings = ProductService.create_product(request_payload(), parse_image_changes())
    return jsonify(product_response(product, "Product created successfully", warnings)), 201


@product_bp.route("/<product_id>", methods=["PUT"])
@jwt_required()
def update_product(product_id):
    product, warnings = ProductService.update_product(
        product_id, request_payload(), parse_image_changes()
    )
    return jsonify(product_response(product, "Product updated successfully", warnings)), 200


@product_bp.route("/<product_id>", methods=["DELETE"])
@jwt_required()
def delete_product(product_id):
    ProductService.delete_product(product_id)
    return jsonify({"success": True, "message": "Product deleted successfully"}), 200

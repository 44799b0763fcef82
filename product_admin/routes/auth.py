from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, current_user
from product_admin.services.auth_service import AuthService
from product_admin.schemas import UserLoginSchema
from product_admin.utils.validators import validate_schema

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
@validate_schema(UserLoginSchema, message="Please provide username and password")
def login():
    """User login"""
    data = request.validated_data
    result = AuthService.login_user(**data)
    return jsonify({"success": True, "message": "Login successful", "data": result}), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def get_me():
    """Get current user info"""
    return jsonify({"success": True, "data": AuthService.get_profile(current_user)}), 200


@auth_bp.route("/logout", methods=["POST"])
@jwt_required()
def logout():
    """Tokens are stateless; the client discards its copy"""
    return jsonify({"success": True, "message": "Logout successful"}), 200

from product_admin.models.user import User
from product_admin.schemas import UserProfileSchema
from product_admin.utils.exceptions import InvalidCredentials
from flask_jwt_extended import create_access_token


class AuthService:
    """Login and user lookup; tokens carry the user id and nothing else"""

    @staticmethod
    def create_user(username: str, password: str, name: str, email: str) -> User:
        """Provision a user (CLI only, there is no sign-up endpoint)"""
        username = username.strip()
        email = email.strip().lower()

        if User.query.filter_by(username=username).first():
            raise ValueError("Username already exists")

        if User.query.filter_by(email=email).first():
            raise ValueError("Email already exists")

        user = User(username=username, name=name.strip(), email=email)
        user.set_password(password)
        return user.save()

    @staticmethod
    def login_user(username: str, password: str) -> dict:
        """Authenticate user and generate an access token"""
        user = User.query.filter_by(username=username).first()

        if not user or not user.check_password(password):
            raise InvalidCredentials()

        return {
            "token": create_access_token(identity=user.id),
            "user": UserProfileSchema().dump(user),
        }

    @staticmethod
    def get_profile(user: User) -> dict:
        return UserProfileSchema().dump(user)

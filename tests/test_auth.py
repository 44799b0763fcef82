from datetime import timedelta

from flask_jwt_extended import create_access_token

from product_admin import db
from product_admin.models.category import Category


class TestAuthLogin:
    """Test user login"""

    def test_login_success(self, client, admin_user):
        """Test successful login"""
        response = client.post(
            "/api/auth/login", json={"username": "admin", "password": "password123"}
        )

        assert response.status_code == 200
        assert response.json["success"] is True
        assert "token" in response.json["data"]
        assert response.json["data"]["user"] == {
            "id": admin_user.id,
            "username": "admin",
            "name": "Admin User",
            "email": "admin@example.com",
        }

    def test_login_missing_fields(self, client):
        """Test login without a password"""
        response = client.post("/api/auth/login", json={"username": "admin"})

        assert response.status_code == 400
        assert response.json["error"] == "VALIDATION_ERROR"
        assert "password" in response.json["errors"]

    def test_login_invalid_username(self, client, admin_user):
        """Test login with invalid username"""
        response = client.post(
            "/api/auth/login",
            json={"username": "nonexistent", "password": "password123"},
        )

        assert response.status_code == 401
        assert response.json["error"] == "INVALID_CREDENTIALS"

    def test_login_invalid_password(self, client, admin_user):
        """Test login with invalid password"""
        response = client.post(
            "/api/auth/login",
            json={"username": "admin", "password": "wrongpassword"},
        )

        assert response.status_code == 401
        assert response.json["error"] == "INVALID_CREDENTIALS"
        assert response.json["message"] == "Invalid username or password"


class TestAuthToken:
    """Test token protected routes"""

    def test_get_me_success(self, client, auth_headers):
        """Test get current user"""
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json["data"]["username"] == "admin"
        assert set(response.json["data"]) == {"id", "username", "name", "email"}

    def test_get_me_without_token(self, client):
        """Test get current user without token"""
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json["error"] == "UNAUTHORIZED"

    def test_get_me_invalid_token(self, client):
        """Test get current user with malformed token"""
        response = client.get(
            "/api/auth/me", headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401
        assert response.json["error"] == "UNAUTHORIZED"

    def test_expired_token(self, app, client, admin_user):
        """Test expired token is rejected"""
        token = create_access_token(identity=admin_user.id, expires_delta=timedelta(seconds=-10))

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json["error"] == "UNAUTHORIZED"

    def test_token_signed_with_other_key(self, app, client, admin_user):
        """Test tampered token causes no mutation"""
        app.config["JWT_SECRET_KEY"] = "someone-elses-secret"
        token = create_access_token(identity=admin_user.id)
        app.config["JWT_SECRET_KEY"] = "test-jwt-secret"

        response = client.post(
            "/api/categories",
            json={"name": "Books"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json["error"] == "UNAUTHORIZED"
        assert Category.query.count() == 0

    def test_token_of_deleted_user(self, client, admin_user, auth_headers):
        """Test token of a removed account is rejected"""
        db.session.delete(admin_user)
        db.session.commit()

        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 401
        assert response.json["error"] == "UNAUTHORIZED"

    def test_logout(self, client, auth_headers):
        """Test logout is a stateless no-op"""
        response = client.post("/api/auth/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json["success"] is True

        # the token stays valid until it expires
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200

    def test_logout_without_token(self, client):
        response = client.post("/api/auth/logout")
        assert response.status_code == 401

from product_admin.models.user import User


class TestCommands:
    """Test Flask CLI commands"""

    def test_create_default_user(self, app, runner):
        result = runner.invoke(args=["create-user"])

        assert result.exit_code == 0
        assert "User created successfully!" in result.output
        user = User.query.filter_by(username="admin").first()
        assert user.email == "admin@example.com"
        assert user.check_password("admin123")

    def test_create_custom_user(self, app, runner):
        result = runner.invoke(
            args=[
                "create-user",
                "--username", "jane",
                "--password", "s3cret",
                "--name", "Jane Doe",
                "--email", "jane@example.com",
            ]
        )

        assert result.exit_code == 0
        assert User.query.filter_by(username="jane").first().name == "Jane Doe"

    def test_create_duplicate_user(self, app, runner, admin_user):
        result = runner.invoke(args=["create-user"])

        assert result.exit_code != 0
        assert "Username already exists" in result.output

    def test_init_db(self, app, runner):
        result = runner.invoke(args=["init-db"])

        assert result.exit_code == 0
        assert "Database initialized" in result.output

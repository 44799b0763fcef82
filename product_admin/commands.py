import click

from product_admin.extensions import db


def register_commands(app):
    """Flask CLI commands for database setup and user provisioning"""

    @app.cli.command("init-db")
    def init_db():
        """Initialize database"""
        db.create_all()
        click.echo('Database initialized successfully!')

    @app.cli.command("drop-db")
    @click.confirmation_option(prompt='Are you sure you want to drop all tables?')
    def drop_db():
        """Drop all tables"""
        db.drop_all()
        click.echo('Database dropped successfully!')

    @app.cli.command("create-user")
    @click.option('--username', default='admin', show_default=True)
    @click.option('--password', default='admin123', show_default=True)
    @click.option('--name', default='Admin User', show_default=True)
    @click.option('--email', default='admin@example.com', show_default=True)
    def create_user(username, password, name, email):
        """Create a dashboard user"""
        from product_admin.services.auth_service import AuthService

        try:
            user = AuthService.create_user(
                username=username, password=password, name=name, email=email
            )
        except ValueError as e:
            raise click.ClickException(str(e))

        click.echo('User created successfully!')
        click.echo(f'   Username: {user.username}')
        click.echo(f'   User ID: {user.id}')

import click

from gym_management.errors import DuplicateEmail
from gym_management.extensions import db
from gym_management.models import Role


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables (development without migrations)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.argument("name")
    @click.password_option()
    def create_admin(email, name, password):
        """Create an admin account."""
        from gym_management.services.users import create_user

        try:
            user = create_user(name=name, email=email, password=password, role=Role.ADMIN)
        except DuplicateEmail:
            raise click.ClickException(f"User with email '{email}' already exists.")
        click.echo(f"Admin created successfully! id={user.id} email={user.email}")

    @app.cli.command("snapshot-progress")
    def snapshot_progress():
        """Record a progress snapshot for every member."""
        from gym_management.services.progress import capture_snapshots

        snapshots = capture_snapshots()
        click.echo(f"Captured {len(snapshots)} progress snapshots.")

import click
from flask.cli import with_appcontext

from hopeshare.extensions import db
from hopeshare.models.user import User
from hopeshare.utils.transaction import transactional


@click.command("create-admin")
@click.argument("email")
@click.argument("password")
@click.option("--name", default=None, help="Display name")
@with_appcontext
def create_admin(email, password, name):
    """Create an admin account, or promote an existing user."""
    email = email.strip().lower()
    user = User.query.filter_by(email=email).first()

    with transactional():
        if user is None:
            user = User()
            user.email = email
            user.name = name
            user.set_password(password)
            db.session.add(user)
            message = "Admin created successfully!"
        else:
            message = "Existing user promoted to admin."
        user.role = "admin"
        user.is_active = True

    click.echo(message)


@click.command("init-db")
@with_appcontext
def init_db():
    """Create all tables (development only; use migrations elsewhere)."""
    db.create_all()
    click.echo("Database tables created.")


def register_commands(app):
    app.cli.add_command(create_admin)
    app.cli.add_command(init_db)

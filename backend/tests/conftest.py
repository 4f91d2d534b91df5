from datetime import datetime, timedelta

import pytest
from flask_jwt_extended import create_access_token

from hopeshare import create_app
from hopeshare.extensions import db
from hopeshare.models.user import User


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(email, role="user", password="secret123"):
    user = User()
    user.email = email
    user.role = role
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    return make_user("admin@example.org", role="admin")


@pytest.fixture
def member_user(app):
    return make_user("member@example.org")


def auth_headers(user):
    token = create_access_token(identity=user.id, additional_claims={"is_admin": user.is_admin})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def member_headers(member_user):
    return auth_headers(member_user)


@pytest.fixture
def add_row(app):
    """Insert a model row directly, optionally with an explicit created_at."""
    def _add(model, **fields):
        row = model()
        for key, value in fields.items():
            setattr(row, key, value)
        db.session.add(row)
        db.session.commit()
        return row
    return _add


@pytest.fixture
def timeline():
    """Strictly increasing timestamps: timeline(0) < timeline(1) < ..."""
    base = datetime(2024, 1, 1, 9, 0, 0)
    return lambda step: base + timedelta(minutes=step)

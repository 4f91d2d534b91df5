from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with their blueprints
from . import health
from . import auth
from . import public
from . import forms
from .admin import admin_bp
from . import audit

v1_bp.register_blueprint(admin_bp, url_prefix="/admin")

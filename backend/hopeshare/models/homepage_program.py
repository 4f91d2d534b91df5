from hopeshare.extensions import db
from .base import BaseModel
from .display_order_mixin import DisplayOrderMixin

class HomepageProgram(BaseModel, DisplayOrderMixin):
    """Program card shown in the homepage programs section."""
    __tablename__ = "homepage_programs"

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    image_url = db.Column(db.String(512), nullable=True)
    link = db.Column(db.String(512), nullable=False, default="")
    icon = db.Column(db.String(50), nullable=False, default="")

from hopeshare.extensions import db
from .base import BaseModel
from .display_order_mixin import DisplayOrderMixin

class Banner(BaseModel, DisplayOrderMixin):
    __tablename__ = "banners"

    image_url = db.Column(db.String(512), nullable=False)
    title = db.Column(db.String(200), nullable=True)
    link_url = db.Column(db.String(512), nullable=True)
    slide_interval = db.Column(db.Integer, nullable=False, default=5)  # seconds
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

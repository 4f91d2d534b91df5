from hopeshare.extensions import db
from .base import BaseModel
from .display_order_mixin import DisplayOrderMixin

class Video(BaseModel, DisplayOrderMixin):
    __tablename__ = "videos"

    title = db.Column(db.String(200), nullable=False)
    youtube_url = db.Column(db.String(512), nullable=False)
    description = db.Column(db.Text, nullable=True)
    is_featured = db.Column(db.Boolean, nullable=False, default=False, index=True)

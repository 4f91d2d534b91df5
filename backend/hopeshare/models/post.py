from hopeshare.extensions import db
from .base import BaseModel

class Post(BaseModel):
    __tablename__ = "posts"

    title = db.Column(db.String(300), nullable=False)
    category = db.Column(db.String(50), nullable=False, default="notice", index=True)
    content = db.Column(db.Text, nullable=True)  # rich text (HTML)
    cover_image = db.Column(db.String(512), nullable=True)
    pinned = db.Column(db.Boolean, nullable=False, default=False, index=True)

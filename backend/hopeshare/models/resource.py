from hopeshare.extensions import db
from .base import BaseModel

class Resource(BaseModel):
    """Downloadable document (forms, reports, guides)."""
    __tablename__ = "resources"

    title = db.Column(db.String(300), nullable=False)
    category = db.Column(db.String(50), nullable=False, default="general", index=True)
    file_url = db.Column(db.String(512), nullable=False)

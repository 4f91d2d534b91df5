from hopeshare.extensions import db
from .base import BaseModel

class GalleryAlbum(BaseModel):
    __tablename__ = "gallery_albums"

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    images = db.Column(db.JSON, nullable=False, default=list)

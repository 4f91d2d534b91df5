from hopeshare.extensions import db
from .base import BaseModel

class Program(BaseModel):
    __tablename__ = "programs"

    title = db.Column(db.String(200), nullable=False)
    summary = db.Column(db.Text, nullable=True)
    content = db.Column(db.Text, nullable=True)
    target = db.Column(db.String(200), nullable=True)
    schedule = db.Column(db.String(200), nullable=True)
    images = db.Column(db.JSON, nullable=False, default=list)
    tags = db.Column(db.JSON, nullable=False, default=list)

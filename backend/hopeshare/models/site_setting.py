from hopeshare.extensions import db
from .base import BaseModel

class SiteSetting(BaseModel):
    __tablename__ = "site_settings"

    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=True)

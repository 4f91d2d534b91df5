from hopeshare.extensions import db
from .base import BaseModel
from .display_order_mixin import DisplayOrderMixin

class PartnerOrganization(BaseModel, DisplayOrderMixin):
    __tablename__ = "partner_organizations"

    name = db.Column(db.String(200), nullable=False)
    logo_url = db.Column(db.String(512), nullable=False)
    link_url = db.Column(db.String(512), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

from hopeshare.extensions import db
from .base import BaseModel
from .display_order_mixin import DisplayOrderMixin

# About-page records: free-form sections, history timeline,
# organisation chart and facilities.

class PageContent(BaseModel, DisplayOrderMixin):
    __tablename__ = "page_contents"

    page_key = db.Column(db.String(100), nullable=False, index=True)
    section_key = db.Column(db.String(100), nullable=False)
    title = db.Column(db.String(200), nullable=True)
    content = db.Column(db.Text, nullable=True)
    images = db.Column(db.JSON, nullable=False, default=list)


class HistoryItem(BaseModel, DisplayOrderMixin):
    __tablename__ = "history_items"

    year = db.Column(db.String(10), nullable=False)
    event = db.Column(db.Text, nullable=False)
    month = db.Column(db.Integer, nullable=True)
    day = db.Column(db.Integer, nullable=True)
    images = db.Column(db.JSON, nullable=False, default=list)


class OrganizationItem(BaseModel, DisplayOrderMixin):
    __tablename__ = "organization_items"

    name = db.Column(db.String(100), nullable=False)
    position = db.Column(db.String(100), nullable=True)
    level = db.Column(db.Integer, nullable=False, default=0)
    parent_id = db.Column(db.String(36), db.ForeignKey("organization_items.id"), nullable=True)


class Facility(BaseModel, DisplayOrderMixin):
    __tablename__ = "facilities"

    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    images = db.Column(db.JSON, nullable=False, default=list)

from hopeshare.extensions import db
from .base import BaseModel
from .display_order_mixin import DisplayOrderMixin

class RecruitmentPost(BaseModel, DisplayOrderMixin):
    __tablename__ = "recruitment_posts"

    title = db.Column(db.String(300), nullable=False)
    content = db.Column(db.Text, nullable=True)
    poster_image = db.Column(db.String(512), nullable=True)
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    is_featured = db.Column(db.Boolean, nullable=False, default=False)
    attachments = db.Column(db.JSON, nullable=False, default=list)

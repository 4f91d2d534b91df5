from hopeshare.extensions import db

class DisplayOrderMixin:
    display_order = db.Column(db.Integer, nullable=False, default=0, index=True)

from hopeshare.extensions import db
from .base import BaseModel

# Rows written by the public forms. Admins read and delete them only.

class ContactMessage(BaseModel):
    __tablename__ = "contact_messages"

    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(254), nullable=False)
    subject = db.Column(db.String(200), nullable=True)
    message = db.Column(db.Text, nullable=False)


class DonationInquiry(BaseModel):
    __tablename__ = "donation_inquiries"

    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(20), nullable=True)
    email = db.Column(db.String(254), nullable=True)
    donation_type = db.Column(db.String(50), nullable=False)
    message = db.Column(db.Text, nullable=True)


class VolunteerApplication(BaseModel):
    __tablename__ = "volunteer_applications"

    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    email = db.Column(db.String(254), nullable=False)
    availability = db.Column(db.String(500), nullable=True)
    message = db.Column(db.Text, nullable=True)

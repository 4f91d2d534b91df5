from typing import Dict
from hopeshare.application.content.collection import Collection

DASHBOARD_COLLECTIONS = (
    "posts",
    "programs",
    "gallery_albums",
    "resources",
    "donation_inquiries",
    "volunteer_applications",
    "contact_messages",
)


def dashboard_counts() -> Dict[str, int]:
    return {name: Collection(name).count() for name in DASHBOARD_COLLECTIONS}

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Type

from hopeshare import models
from hopeshare.domain.invariants.exceptions import EntityNotFound

SortKey = Tuple[str, str]
Filter = Tuple[str, Any]

# Ordered collections list by display_order, newest first on ties.
ORDERED = (("display_order", "asc"), ("created_at", "desc"))
NEWEST_FIRST = (("created_at", "desc"),)


@dataclass(frozen=True)
class CollectionSpec:
    name: str
    model: Type[Any]
    order: Tuple[SortKey, ...] = NEWEST_FIRST
    defaults: Dict[str, Any] = field(default_factory=dict)
    public_filters: Tuple[Filter, ...] = ()
    inbox: bool = False

    @property
    def ordered(self) -> bool:
        return hasattr(self.model, "display_order")


COLLECTIONS: Dict[str, CollectionSpec] = {
    spec.name: spec
    for spec in (
        CollectionSpec(
            "site_settings",
            models.SiteSetting,
            order=(("key", "asc"),),
        ),
        CollectionSpec(
            "banners",
            models.Banner,
            order=ORDERED,
            defaults={"slide_interval": 5, "is_active": True},
            public_filters=(("is_active", True),),
        ),
        CollectionSpec(
            "homepage_programs",
            models.HomepageProgram,
            order=ORDERED,
            defaults={"description": "", "link": "", "icon": ""},
        ),
        CollectionSpec(
            "partner_organizations",
            models.PartnerOrganization,
            order=ORDERED,
            defaults={"is_active": True},
            public_filters=(("is_active", True),),
        ),
        CollectionSpec(
            "page_contents",
            models.PageContent,
            order=ORDERED,
            defaults={"images": []},
        ),
        CollectionSpec(
            "history_items",
            models.HistoryItem,
            order=ORDERED,
            defaults={"images": []},
        ),
        CollectionSpec(
            "organization_items",
            models.OrganizationItem,
            order=ORDERED,
            defaults={"level": 0},
        ),
        CollectionSpec(
            "facilities",
            models.Facility,
            order=ORDERED,
            defaults={"images": []},
        ),
        CollectionSpec(
            "posts",
            models.Post,
            order=(("pinned", "desc"), ("created_at", "desc")),
            defaults={"category": "notice", "pinned": False},
        ),
        CollectionSpec(
            "recruitment_posts",
            models.RecruitmentPost,
            order=ORDERED,
            defaults={"is_active": True, "is_featured": False, "attachments": []},
            public_filters=(("is_active", True),),
        ),
        CollectionSpec(
            "programs",
            models.Program,
            defaults={"images": [], "tags": []},
        ),
        CollectionSpec(
            "gallery_albums",
            models.GalleryAlbum,
            defaults={"images": []},
        ),
        CollectionSpec(
            "videos",
            models.Video,
            order=ORDERED,
            defaults={"is_featured": False},
        ),
        CollectionSpec(
            "resources",
            models.Resource,
            defaults={"category": "general"},
        ),
        CollectionSpec("contact_messages", models.ContactMessage, inbox=True),
        CollectionSpec("donation_inquiries", models.DonationInquiry, inbox=True),
        CollectionSpec("volunteer_applications", models.VolunteerApplication, inbox=True),
    )
}


def get_collection_spec(name: str) -> CollectionSpec:
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise EntityNotFound(f"Unknown collection: {name}") from None

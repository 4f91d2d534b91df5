import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .exceptions import InvariantViolation

YOUTUBE_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/shorts/([^&\n?#]+)"),
)


def extract_youtube_id(url: str) -> Optional[str]:
    for pattern in YOUTUBE_PATTERNS:
        match = pattern.search(url or "")
        if match:
            return match.group(1)
    return None


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _youtube_url(value: Any) -> Optional[str]:
    if extract_youtube_id(value) is None:
        return "A valid YouTube URL is required"
    return None


def _positive_int(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return "must be a whole number of at least 1"
    return None


Check = Callable[[Any], Optional[str]]


@dataclass(frozen=True)
class Constraint:
    required: Tuple[str, ...] = ()
    checks: Tuple[Tuple[str, Check], ...] = ()


# Single source of truth for admin-side record validation.
ENTITY_CONSTRAINTS: Dict[str, Constraint] = {
    "site_settings": Constraint(required=("key",)),
    "banners": Constraint(
        required=("image_url",),
        checks=(("slide_interval", _positive_int),),
    ),
    "homepage_programs": Constraint(required=("title",)),
    "partner_organizations": Constraint(required=("name", "logo_url")),
    "page_contents": Constraint(required=("page_key", "section_key")),
    "history_items": Constraint(required=("year", "event")),
    "organization_items": Constraint(required=("name",)),
    "facilities": Constraint(required=("name",)),
    "posts": Constraint(required=("title",)),
    "recruitment_posts": Constraint(required=("title",)),
    "programs": Constraint(required=("title",)),
    "gallery_albums": Constraint(required=("title",)),
    "videos": Constraint(
        required=("title", "youtube_url"),
        checks=(("youtube_url", _youtube_url),),
    ),
    "resources": Constraint(required=("title", "file_url")),
}


def assert_entity(collection: str, data: Mapping[str, Any]) -> None:
    """
    Validates a record against the constraint table.
    Raises on the first failing field; later fields are not inspected.
    """
    constraint = ENTITY_CONSTRAINTS.get(collection)
    if constraint is None:
        return

    for field in constraint.required:
        if _is_blank(data.get(field)):
            raise InvariantViolation(f"{field} is required", field=field)

    for field, check in constraint.checks:
        if field not in data or data[field] is None:
            continue
        problem = check(data[field])
        if problem:
            raise InvariantViolation(f"{field}: {problem}", field=field)

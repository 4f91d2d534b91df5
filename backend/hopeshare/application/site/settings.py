# hopeshare/application/site/settings.py
from typing import Dict, Mapping, Optional

from hopeshare.application.content.collection import Collection
from hopeshare.domain.invariants.exceptions import InvariantViolation
from hopeshare.models.site_setting import SiteSetting
from hopeshare.utils.audit import log_action
from hopeshare.utils.transaction import transactional

# Used whenever a key has no stored value
DEFAULT_SETTINGS: Dict[str, Optional[str]] = {
    "logo_url": None,
    "org_name": "S&J Hope Sharing",
    "org_subtitle": "Youth education and welfare",
    "phone": "053-428-7942",
    "address": "",
    "hero_badge": "S&J Hope Sharing",
    "hero_title": "Growing the dreams and hopes of young people together",
    "hero_subtitle": "Education, counselling and cultural programs that help young people grow up healthy.",
    "hero_image_url": None,
    "hero_overlay_color": "#1e3a5f",
    "hero_stat_1_label": "Founded",
    "hero_stat_1_value": "2015",
    "hero_stat_2_label": "Young people supported",
    "hero_stat_2_value": "5,000+",
    "hero_stat_3_label": "Programs run",
    "hero_stat_3_value": "50+",
    "hero_stat_4_label": "Volunteers",
    "hero_stat_4_value": "300+",
    "programs_badge": "Programs",
    "programs_title": "Programs for young people",
    "programs_subtitle": "Learning, counselling and culture support for every stage of growth.",
    "news_badge": "News",
    "news_title": "Notices and news",
    "footer_org_name": "S&J Hope Sharing",
    "footer_org_subtitle": "S&J Hope Sharing Foundation",
    "footer_address": "",
    "footer_phone": "053-428-7942",
    "footer_email": "",
    "footer_work_hours": "Weekdays 10:00 - 18:00\nLunch 12:00 - 13:00",
    "footer_org_number": "",
    "footer_copyright": "",
    "footer_cta_title": "Together we make greater hope",
    "footer_cta_subtitle": "Your interest shapes a brighter future for young people.",
    "footer_sns_blog": "",
    "footer_sns_youtube": "",
    "footer_sns_instagram": "",
    "footer_sns_facebook": "",
    "contact_fax": "",
    "contact_map_embed": "",
    "contact_transport": "",
}


def load_settings() -> Dict[str, Optional[str]]:
    """
    Stored values merged over the defaults.
    Stored nulls and unknown keys do not change the result.
    """
    merged = dict(DEFAULT_SETTINGS)
    for row in Collection("site_settings").select():
        if row.key in merged and row.value is not None:
            merged[row.key] = row.value
    return merged


def save_settings(*, values: Mapping[str, Optional[str]], actor_id: Optional[str]) -> Dict[str, Optional[str]]:
    """Upsert each key; only known keys are accepted."""
    unknown = sorted(set(values) - set(DEFAULT_SETTINGS))
    if unknown:
        raise InvariantViolation(f"Unknown setting: {unknown[0]}", field=unknown[0])

    store = Collection("site_settings")
    with transactional():
        for key, value in values.items():
            existing = SiteSetting.query.filter_by(key=key).first()
            data = {"key": key, "value": None if value is None else str(value)}
            if existing:
                store.replace(existing.id, data, row=existing)
            else:
                store.insert(data)

        log_action(
            action="site_settings.update",
            entity_type="site_settings",
            entity_id="*",
            actor_id=actor_id,
            payload={"keys": sorted(values)},
        )

    return load_settings()

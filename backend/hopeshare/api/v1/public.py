# hopeshare/api/v1/public.py
from flask import current_app, request, jsonify
from hopeshare.application.content.collection import Collection
from hopeshare.application.site.listing import build_listing, listing_args
from hopeshare.application.site.settings import load_settings
from hopeshare.domain.invariants.exceptions import EntityNotFound
from hopeshare.normalizers.entity import normalize_entity
from hopeshare.normalizers.pagination import normalize_listing
from . import v1_bp

LATEST_POSTS_LIMIT = 4
FEATURED_VIDEOS_LIMIT = 3


def public_rows(name, filters=(), order=None, limit=None):
    """Rows a public reader may see: visibility flags always apply."""
    store = Collection(name)
    filters = tuple(store.spec.public_filters) + tuple(filters)
    return store.select(filters, order, limit)


def public_row(name, entity_id):
    store = Collection(name)
    row = store.get(entity_id)
    for field, value in store.spec.public_filters:
        if getattr(row, field) != value:
            raise EntityNotFound(f"{name} record not found")
    return row


def rows_response(rows):
    return jsonify({"items": [normalize_entity(r) for r in rows]})


def limit_arg(default):
    limit = request.args.get("limit", default, type=int)
    return max(1, min(limit, 100))


# ------------------------
# Site chrome & homepage
# ------------------------

@v1_bp.route("/site/settings", methods=["GET"])
def site_settings():
    return jsonify(load_settings())


@v1_bp.route("/banners", methods=["GET"])
def list_banners():
    return rows_response(public_rows("banners"))


@v1_bp.route("/homepage-programs", methods=["GET"])
def list_homepage_programs():
    return rows_response(public_rows("homepage_programs"))


@v1_bp.route("/partners", methods=["GET"])
def list_partners():
    return rows_response(public_rows("partner_organizations"))


# ------------------------
# News
# ------------------------

@v1_bp.route("/posts", methods=["GET"])
def list_posts():
    category, query, page = listing_args(request.args)

    listing = build_listing(
        public_rows("posts"),
        category=category,
        query=query,
        page=page,
        page_size=current_app.config.get("NEWS_PAGE_SIZE", 10),
        search_fields=("title", "content"),
        html_fields=("content",),
    )
    return jsonify(normalize_listing(listing, normalize_entity))


@v1_bp.route("/posts/latest", methods=["GET"])
def latest_posts():
    rows = public_rows(
        "posts",
        order=(("pinned", "desc"), ("created_at", "desc")),
        limit=limit_arg(LATEST_POSTS_LIMIT),
    )
    return rows_response(rows)


@v1_bp.route("/posts/<post_id>", methods=["GET"])
def get_post(post_id):
    return jsonify(normalize_entity(public_row("posts", post_id)))


# ------------------------
# Programs, gallery, videos
# ------------------------

@v1_bp.route("/programs", methods=["GET"])
def list_programs():
    return rows_response(public_rows("programs"))


@v1_bp.route("/programs/<program_id>", methods=["GET"])
def get_program(program_id):
    return jsonify(normalize_entity(public_row("programs", program_id)))


@v1_bp.route("/gallery", methods=["GET"])
def list_gallery():
    return rows_response(public_rows("gallery_albums"))


@v1_bp.route("/gallery/<album_id>", methods=["GET"])
def get_album(album_id):
    return jsonify(normalize_entity(public_row("gallery_albums", album_id)))


@v1_bp.route("/videos", methods=["GET"])
def list_videos():
    if request.args.get("featured") in ("1", "true"):
        rows = public_rows(
            "videos",
            filters=(("is_featured", True),),
            limit=limit_arg(FEATURED_VIDEOS_LIMIT),
        )
    else:
        rows = public_rows("videos")
    return rows_response(rows)


# ------------------------
# Recruitment & resources
# ------------------------

@v1_bp.route("/recruitment", methods=["GET"])
def list_recruitment():
    return rows_response(public_rows("recruitment_posts"))


@v1_bp.route("/recruitment/<post_id>", methods=["GET"])
def get_recruitment(post_id):
    return jsonify(normalize_entity(public_row("recruitment_posts", post_id)))


@v1_bp.route("/resources", methods=["GET"])
def list_resources():
    category, query, _ = listing_args(request.args)

    listing = build_listing(
        public_rows("resources"),
        category=category,
        query=query,
        search_fields=("title", "category"),
    )
    return jsonify(normalize_listing(listing, normalize_entity))


# ------------------------
# About pages
# ------------------------

@v1_bp.route("/pages/<page_key>", methods=["GET"])
def page_contents(page_key):
    rows = public_rows("page_contents", filters=(("page_key", page_key),))
    return jsonify({
        "page_key": page_key,
        "items": [normalize_entity(r) for r in rows],
    })


@v1_bp.route("/about/history", methods=["GET"])
def list_history():
    return rows_response(public_rows("history_items"))


@v1_bp.route("/about/organization", methods=["GET"])
def list_organization():
    return rows_response(public_rows("organization_items"))


@v1_bp.route("/about/facilities", methods=["GET"])
def list_facilities():
    return rows_response(public_rows("facilities"))

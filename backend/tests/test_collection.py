from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from hopeshare.application.content.collection import Collection
from hopeshare.domain.invariants.exceptions import BackendError, EntityNotFound, InvariantViolation
from hopeshare.extensions import db
from hopeshare.models import Banner, Post, RecruitmentPost


def test_unknown_collection_is_not_found(app):
    with pytest.raises(EntityNotFound):
        Collection("donors")


def test_ordered_collection_sorts_by_display_order_then_newest(add_row, timeline):
    add_row(Banner, image_url="/b.png", display_order=1, created_at=timeline(0))
    add_row(Banner, image_url="/c.png", display_order=0, created_at=timeline(1))
    add_row(Banner, image_url="/a.png", display_order=0, created_at=timeline(2))

    rows = Collection("banners").select()

    assert [r.image_url for r in rows] == ["/a.png", "/c.png", "/b.png"]


def test_repeated_reads_return_the_same_order(add_row, timeline):
    for i in range(6):
        add_row(Banner, image_url=f"/{i}.png", display_order=i % 2, created_at=timeline(0))

    store = Collection("banners")
    first = [r.id for r in store.select()]

    for _ in range(3):
        assert [r.id for r in store.select()] == first


def test_equality_filters_and_limit(add_row, timeline):
    add_row(Banner, image_url="/on.png", is_active=True, created_at=timeline(0))
    add_row(Banner, image_url="/off.png", is_active=False, created_at=timeline(1))
    add_row(Banner, image_url="/on2.png", is_active=True, created_at=timeline(2))

    store = Collection("banners")

    active = store.select(filters=(("is_active", True),))
    assert {r.image_url for r in active} == {"/on.png", "/on2.png"}
    assert len(store.select(limit=1)) == 1
    assert store.count() == 3


def test_unknown_filter_field_is_rejected(app):
    with pytest.raises(InvariantViolation) as exc:
        Collection("posts").select(filters=(("author", "x"),))
    assert exc.value.field == "author"


def test_replace_resets_omitted_fields_to_defaults(app):
    store = Collection("posts")
    row = store.insert({"title": "Camp", "category": "event", "pinned": True, "content": "<p>x</p>"})
    db.session.commit()

    store.replace(row.id, {"title": "Camp (updated)"})
    db.session.commit()

    fresh = store.get(row.id)
    assert fresh.title == "Camp (updated)"
    assert fresh.category == "notice"
    assert fresh.pinned is False
    assert fresh.content is None


def test_date_fields_are_parsed_from_iso_strings(app):
    store = Collection("recruitment_posts")
    row = store.insert({"title": "Mentors wanted", "start_date": "2024-03-01", "end_date": ""})
    db.session.commit()

    fresh = db.session.get(RecruitmentPost, row.id)
    assert fresh.start_date == date(2024, 3, 1)
    assert fresh.end_date is None
    assert fresh.attachments == []


def test_invalid_date_names_the_field(app):
    with pytest.raises(InvariantViolation) as exc:
        Collection("recruitment_posts").insert({"title": "x", "start_date": "next week"})
    assert exc.value.field == "start_date"


def test_get_missing_row(app):
    with pytest.raises(EntityNotFound):
        Collection("posts").get("missing")


def test_database_failures_become_backend_errors(app, monkeypatch):
    def broken_all(self):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr("sqlalchemy.orm.Query.all", broken_all)

    with pytest.raises(BackendError) as exc:
        Collection("posts").select()
    assert "connection lost" not in exc.value.message


def test_form_helpers(add_row):
    post = add_row(Post, title="Hello", category="event", pinned=True)
    store = Collection("posts")

    assert store.blank_form() == {
        "title": None,
        "category": "notice",
        "content": None,
        "cover_image": None,
        "pinned": False,
    }
    form = store.to_form(post)
    assert form["title"] == "Hello"
    assert "id" not in form and "created_at" not in form

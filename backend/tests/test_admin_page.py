from datetime import datetime

import pytest

from hopeshare.application.content import admin_page as admin_page_module
from hopeshare.application.content.admin_page import AdminCrudPage
from hopeshare.domain.invariants.exceptions import BackendError, EntityNotFound, InvariantViolation
from hopeshare.domain.lifecycle.admin_page import PageState
from hopeshare.extensions import db
from hopeshare.models import AuditLog, Banner, ContactMessage, Post, RecruitmentPost, Video


class Notices:
    def __init__(self):
        self.seen = []

    def __call__(self, level, message):
        self.seen.append((level, message))

    @property
    def last(self):
        return self.seen[-1]


@pytest.fixture
def notices():
    return Notices()


def make_page(collection, notices, answer=True, **options):
    prompts = []

    def confirm(prompt):
        prompts.append(prompt)
        return answer

    page = AdminCrudPage(collection, confirm=confirm, notify=notices, **options)
    page.prompts = prompts
    return page


def test_create_round_trip_shows_new_record(app, notices):
    page = make_page("posts", notices)
    page.load()
    assert page.items == []

    form = page.open_create()
    assert page.state is PageState.CREATING
    form.update(title="Spring camp", content="<p>Open</p>")

    assert page.save() is True
    assert notices.last == ("success", "Saved")
    assert page.state is PageState.LISTING
    assert [p.title for p in page.items] == ["Spring camp"]


def test_validation_failure_writes_nothing_and_keeps_dialog_open(app, notices):
    page = make_page("videos", notices)
    page.load()

    page.open_create()
    page.form.update(title="Intro", youtube_url="https://example.org/not-youtube")

    assert page.save() is False
    assert notices.last[0] == "error"
    assert "youtube_url" in notices.last[1]
    assert page.state is PageState.CREATING
    assert Video.query.count() == 0


def test_missing_required_field_message(app, notices):
    page = make_page("partner_organizations", notices)
    page.load()
    page.open_create()
    page.form["name"] = "Library"

    assert page.save() is False
    assert notices.last == ("error", "logo_url is required")


def test_open_create_appends_to_end_of_ordered_list(add_row, notices):
    add_row(Banner, image_url="/a.png", display_order=0)
    add_row(Banner, image_url="/b.png", display_order=1)

    page = make_page("banners", notices)
    page.load()
    form = page.open_create()

    assert form["display_order"] == 2
    assert form["slide_interval"] == 5
    assert form["is_active"] is True


def test_edit_prepopulates_and_replaces(add_row, notices):
    post = add_row(Post, title="Old", category="event", pinned=True)

    page = make_page("posts", notices)
    page.load()
    form = page.open_edit(post.id)

    assert page.state is PageState.EDITING
    assert form["title"] == "Old"
    assert form["category"] == "event"

    form["title"] = "New"
    assert page.save() is True
    assert [p.title for p in page.items] == ["New"]
    assert page.items[0].pinned is True


def test_edit_of_unlisted_record_is_rejected(app, notices):
    page = make_page("posts", notices)
    page.load()

    with pytest.raises(EntityNotFound):
        page.open_edit("missing")
    assert page.state is PageState.LISTING


def test_cancel_discards_the_form(add_row, notices):
    post = add_row(Post, title="Keep")
    page = make_page("posts", notices)
    page.load()

    page.open_edit(post.id)
    page.form["title"] = "Changed"
    page.cancel()

    assert page.state is PageState.LISTING
    assert page.form == {}
    assert Post.query.one().title == "Keep"


def test_backend_failure_keeps_dialog_open(app, notices, monkeypatch):
    page = make_page("posts", notices)
    page.load()
    page.open_create()
    page.form["title"] = "Will fail"

    def failing_create(**kwargs):
        raise BackendError()

    monkeypatch.setattr(admin_page_module, "create_entity", failing_create)

    assert page.save() is False
    assert notices.last == ("error", "An error occurred, please try again")
    assert page.state is PageState.CREATING
    assert page.form["title"] == "Will fail"


def test_save_outside_dialog_is_rejected(app, notices):
    page = make_page("posts", notices)
    with pytest.raises(ValueError):
        page.save()


def test_denied_confirmation_makes_no_delete_call(add_row, notices, monkeypatch):
    post = add_row(Post, title="Stay")
    calls = []
    monkeypatch.setattr(admin_page_module, "delete_entity", lambda **kw: calls.append(kw))

    page = make_page("posts", notices, answer=False)
    page.load()

    assert page.delete(post.id) is False
    assert calls == []
    assert len(page.prompts) == 1
    assert page.state is PageState.LISTING
    assert Post.query.count() == 1


def test_confirmed_delete_removes_record_and_refetches(add_row, notices):
    post = add_row(Post, title="Gone")
    page = make_page("posts", notices)
    page.load()

    assert page.delete(post.id) is True
    assert notices.last == ("success", "Deleted")
    assert page.items == []
    assert page.state is PageState.LISTING

    entry = AuditLog.query.filter_by(action="posts.delete").one()
    assert entry.payload["snapshot"]["title"] == "Gone"


def test_failed_delete_still_refetches(add_row, notices):
    add_row(Post, title="Other")
    page = make_page("posts", notices)
    page.load()

    assert page.delete("missing") is False
    assert notices.last[0] == "error"
    assert [p.title for p in page.items] == ["Other"]
    assert page.state is PageState.LISTING


def test_save_all_assigns_display_order_from_position(add_row, notices):
    first = add_row(Banner, image_url="/first.png", display_order=0)
    second = add_row(Banner, image_url="/second.png", display_order=1)

    page = make_page("banners", notices)
    page.load()

    rows = [
        {"id": second.id, "image_url": "/second.png"},
        {"image_url": "/third.png"},
        {"id": first.id, "image_url": "/first.png"},
    ]
    assert page.save_all(rows) is True

    assert [(b.image_url, b.display_order) for b in page.items] == [
        ("/second.png", 0),
        ("/third.png", 1),
        ("/first.png", 2),
    ]


def test_save_all_rolls_back_when_one_row_is_invalid(add_row, notices):
    add_row(Banner, image_url="/only.png", display_order=0)
    page = make_page("banners", notices)
    page.load()

    assert page.save_all([{"image_url": "/new.png"}, {"title": "no image"}]) is False
    assert notices.last == ("error", "Item 2: image_url is required")
    assert [b.image_url for b in Banner.query.all()] == ["/only.png"]


def test_save_all_requires_listing_state(app, notices):
    page = make_page("banners", notices)
    page.load()
    page.open_create()

    with pytest.raises(ValueError):
        page.save_all([])


def test_invalid_date_keeps_dialog_open_and_retryable(app, notices):
    page = make_page("recruitment_posts", notices)
    page.load()
    page.open_create()
    page.form.update(title="Mentors wanted", start_date="not-a-date")

    assert page.save() is False
    assert notices.last == ("error", "start_date is not a valid date")
    assert page.state is PageState.CREATING
    assert page.form["start_date"] == "not-a-date"
    assert RecruitmentPost.query.count() == 0

    page.form["start_date"] = "2024-03-01"
    assert page.save() is True
    assert page.state is PageState.LISTING
    assert RecruitmentPost.query.one().start_date.isoformat() == "2024-03-01"


def test_invalid_date_on_edit_returns_to_editing(add_row, notices):
    post = add_row(RecruitmentPost, title="Tutors")
    page = make_page("recruitment_posts", notices)
    page.load()
    page.open_edit(post.id)
    page.form["end_date"] = "soon"

    assert page.save() is False
    assert page.state is PageState.EDITING
    assert page.form["title"] == "Tutors"

    page.cancel()
    assert page.state is PageState.LISTING


def test_inbox_collections_cannot_open_the_dialog(add_row, notices):
    message = add_row(ContactMessage, name="Kim", email="kim@example.org", message="Hi")
    page = make_page("contact_messages", notices)
    page.load()

    with pytest.raises(InvariantViolation):
        page.open_create()
    with pytest.raises(InvariantViolation):
        page.open_edit(message.id)

    assert page.state is PageState.LISTING
    assert page.delete(message.id) is True
    assert ContactMessage.query.count() == 0


def test_stale_edit_keeps_dialog_open(add_row, notices):
    post = add_row(Post, title="Original")
    page = make_page("posts", notices, versioned=True)
    page.load()
    page.open_edit(post.id)
    page.form["title"] = "Mine"

    # another admin saves the same row meanwhile
    Post.query.filter_by(id=post.id).update({"title": "Theirs", "updated_at": datetime(2100, 1, 1)})
    db.session.commit()

    assert page.save() is False
    assert notices.last == ("error", "An error occurred, please try again")
    assert page.state is PageState.EDITING
    assert page.form["title"] == "Mine"
    assert Post.query.one().title == "Theirs"


def test_versioned_edit_of_unchanged_row_saves(add_row, notices):
    post = add_row(Post, title="Original")
    page = make_page("posts", notices, versioned=True)
    page.load()
    page.open_edit(post.id)
    page.form["title"] = "Updated"

    assert page.save() is True
    assert Post.query.one().title == "Updated"

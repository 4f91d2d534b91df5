from hopeshare.application.site.settings import DEFAULT_SETTINGS
from hopeshare.models import (
    Banner,
    PageContent,
    PartnerOrganization,
    Post,
    RecruitmentPost,
    Resource,
    SiteSetting,
    Video,
)


def titles(response):
    return [item["title"] for item in response.get_json()["items"]]


def test_health(client):
    assert client.get("/api/v1/health").status_code == 200


def test_latest_posts_pinned_first_then_newest(client, add_row, timeline):
    add_row(Post, title="A", pinned=True, created_at=timeline(1))
    add_row(Post, title="B", created_at=timeline(2))
    add_row(Post, title="C", created_at=timeline(3))

    response = client.get("/api/v1/posts/latest")

    assert response.status_code == 200
    assert titles(response) == ["A", "C", "B"]


def test_latest_posts_respects_limit(client, add_row, timeline):
    for step in range(6):
        add_row(Post, title=f"P{step}", created_at=timeline(step))

    assert titles(client.get("/api/v1/posts/latest")) == ["P5", "P4", "P3", "P2"]
    assert titles(client.get("/api/v1/posts/latest?limit=2")) == ["P5", "P4"]


def test_posts_listing_filters_searches_and_pages(app, client, add_row, timeline):
    app.config["NEWS_PAGE_SIZE"] = 2
    add_row(Post, title="Camp notice", category="notice", created_at=timeline(1))
    add_row(Post, title="Festival", category="event", content="<b>Music</b> night", created_at=timeline(2))
    add_row(Post, title="Exam notice", category="notice", created_at=timeline(3))
    add_row(Post, title="Fee notice", category="notice", created_at=timeline(4))

    body = client.get("/api/v1/posts?category=notice&page=2").get_json()
    assert [p["title"] for p in body["items"]] == ["Camp notice"]
    assert body["state"] == "populated"
    assert body["filters"] == {"category": "notice", "q": ""}
    assert body["pagination"] == {"page": 2, "per_page": 2, "total": 3, "total_pages": 2}

    body = client.get("/api/v1/posts?q=MUSIC").get_json()
    assert [p["title"] for p in body["items"]] == ["Festival"]

    # markup is not searchable text
    body = client.get("/api/v1/posts", query_string={"q": "<b>"}).get_json()
    assert body["items"] == []
    assert body["state"] == "no_results"


def test_posts_listing_empty_collection(client):
    body = client.get("/api/v1/posts").get_json()
    assert body["items"] == []
    assert body["state"] == "empty"


def test_page_beyond_end_is_empty(client, add_row):
    add_row(Post, title="Only")
    body = client.get("/api/v1/posts?page=9").get_json()
    assert body["items"] == []
    assert body["pagination"]["page"] == 9


def test_post_detail_and_missing(client, add_row):
    post = add_row(Post, title="Detail", content="<p>Body</p>")

    body = client.get(f"/api/v1/posts/{post.id}").get_json()
    assert body["title"] == "Detail"
    assert "updated_at" not in body

    response = client.get("/api/v1/posts/nope")
    assert response.status_code == 404
    assert response.get_json()["error"] == "not_found"


def test_inactive_rows_are_hidden(client, add_row):
    add_row(Banner, image_url="/on.png", title="On")
    add_row(Banner, image_url="/off.png", title="Off", is_active=False)
    add_row(PartnerOrganization, name="Shown", logo_url="/s.png")
    add_row(PartnerOrganization, name="Hidden", logo_url="/h.png", is_active=False)

    assert titles(client.get("/api/v1/banners")) == ["On"]
    partners = client.get("/api/v1/partners").get_json()["items"]
    assert [p["name"] for p in partners] == ["Shown"]


def test_inactive_recruitment_detail_is_not_found(client, add_row):
    closed = add_row(RecruitmentPost, title="Closed", is_active=False)
    response = client.get(f"/api/v1/recruitment/{closed.id}")
    assert response.status_code == 404


def test_ordered_collections_follow_display_order(client, add_row, timeline):
    add_row(Banner, image_url="/2.png", title="second", display_order=1, created_at=timeline(1))
    add_row(Banner, image_url="/1.png", title="first", display_order=0, created_at=timeline(2))
    add_row(Banner, image_url="/0.png", title="tie-newer", display_order=1, created_at=timeline(3))

    assert titles(client.get("/api/v1/banners")) == ["first", "tie-newer", "second"]


def test_featured_videos(client, add_row):
    for index in range(5):
        add_row(
            Video,
            title=f"V{index}",
            youtube_url=f"https://youtu.be/id{index}",
            display_order=index,
            is_featured=index != 2,
        )

    assert titles(client.get("/api/v1/videos?featured=1")) == ["V0", "V1", "V3"]
    assert len(titles(client.get("/api/v1/videos"))) == 5


def test_resources_search_without_match(client, add_row):
    add_row(Resource, title="Annual report", category="report", file_url="/media/files/a.pdf")

    body = client.get("/api/v1/resources?q=zzz").get_json()

    assert body["items"] == []
    assert body["state"] == "no_results"
    assert "pagination" not in body


def test_resources_filter_by_category(client, add_row):
    add_row(Resource, title="Annual report", category="report", file_url="/a.pdf")
    add_row(Resource, title="Signup form", category="form", file_url="/b.pdf")

    assert titles(client.get("/api/v1/resources?category=form")) == ["Signup form"]
    assert titles(client.get("/api/v1/resources?q=REPORT")) == ["Annual report"]


def test_page_contents_by_key(client, add_row):
    add_row(PageContent, page_key="about", section_key="greeting", title="Hello")
    add_row(PageContent, page_key="contact", section_key="map", title="Map")

    body = client.get("/api/v1/pages/about").get_json()
    assert body["page_key"] == "about"
    assert [s["section_key"] for s in body["items"]] == ["greeting"]


def test_site_settings_merge_stored_values(client, add_row):
    add_row(SiteSetting, key="org_name", value="Stored name")
    add_row(SiteSetting, key="phone", value=None)
    add_row(SiteSetting, key="retired_key", value="ignored")

    body = client.get("/api/v1/site/settings").get_json()

    assert body["org_name"] == "Stored name"
    assert body["phone"] == DEFAULT_SETTINGS["phone"]
    assert "retired_key" not in body

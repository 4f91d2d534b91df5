from hopeshare.application.content.collection import Collection
from hopeshare.application.content.fetch_list import CancellationToken, FetchList
from hopeshare.domain.invariants.exceptions import BackendError
from hopeshare.models import Banner


class RecordingCollection:
    """Stands in for a Collection; counts queries and can fail on demand."""

    name = "banners"

    def __init__(self, results):
        self.results = list(results)
        self.calls = []
        self.fail = False
        self.on_select = None

    def select(self, filters, order, limit):
        self.calls.append((filters, order, limit))
        if self.on_select:
            self.on_select()
        if self.fail:
            raise BackendError()
        return list(self.results)


def test_mount_loads_the_whole_collection(add_row, timeline):
    add_row(Banner, image_url="/a.png", display_order=0, created_at=timeline(0))
    add_row(Banner, image_url="/b.png", display_order=1, created_at=timeline(1))

    with FetchList("banners") as view:
        assert [b.image_url for b in view.items] == ["/a.png", "/b.png"]
        assert view.loading is False
        assert view.error is None


def test_refetch_replaces_items_with_fresh_results(add_row):
    view = FetchList("banners")
    assert view.mount() == []

    add_row(Banner, image_url="/new.png")
    assert [b.image_url for b in view.refetch()] == ["/new.png"]


def test_failed_fetch_keeps_last_known_items():
    source = RecordingCollection(["first", "second"])
    view = FetchList(source)
    view.mount()

    source.fail = True
    items = view.refetch()

    assert items == ["first", "second"]
    assert view.items == ["first", "second"]
    assert isinstance(view.error, BackendError)
    assert view.loading is False
    assert len(source.calls) == 2  # no retry


def test_initial_failure_leaves_items_empty():
    source = RecordingCollection(["x"])
    source.fail = True

    view = FetchList(source)
    view.mount()

    assert view.items == []
    assert view.error is not None


def test_response_arriving_after_close_is_discarded():
    source = RecordingCollection(["late"])
    view = FetchList(source)
    source.on_select = view.close  # owner goes away while the query is in flight

    view.mount()

    assert view.items == []
    assert view.token.cancelled


def test_closed_view_issues_no_more_queries():
    source = RecordingCollection(["x"])
    view = FetchList(source)
    view.mount()
    view.close()

    view.refetch()

    assert len(source.calls) == 1


def test_set_filters_requeries_only_when_filters_change():
    source = RecordingCollection([])
    view = FetchList(source, filters=(("is_active", True),))
    view.mount()

    view.set_filters([("is_active", True)])
    assert len(source.calls) == 1

    view.set_filters([("is_active", False)])
    assert len(source.calls) == 2
    assert source.calls[-1][0] == (("is_active", False),)


def test_shared_token_cancels_every_view():
    token = CancellationToken()
    first = FetchList(RecordingCollection(["a"]), token=token)
    second = FetchList(RecordingCollection(["b"]), token=token)

    token.cancel()

    assert first.mount() == []
    assert second.mount() == []


def test_accepts_collection_instances(app):
    view = FetchList(Collection("posts"), limit=4)
    assert view.mount() == []

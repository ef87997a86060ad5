import pytest

from aurevo.store import VideoStore
from aurevo.store.videos import WELCOME_VIDEO_URL


def test_seeded_with_welcome_video():
    store = VideoStore()
    videos = store.list()
    assert len(videos) == 1
    assert videos[0].id == "1"
    assert videos[0].title == "Welcome to aurevo"
    assert videos[0].publisher == "aurevo"
    assert videos[0].playbackUrl == WELCOME_VIDEO_URL


def test_unseeded_store_is_empty():
    assert VideoStore(seed=False).list() == []


def test_add_prepends():
    store = VideoStore()
    first = store.add(title="First", playback_url="http://a")
    second = store.add(title="Second", playback_url="http://b")
    assert [v.id for v in store.list()] == [second.id, first.id, "1"]


def test_list_returns_a_copy():
    store = VideoStore()
    listed = store.list()
    listed.clear()
    assert len(store) == 1


def test_ids_come_from_the_clock():
    store = VideoStore(clock=lambda: 1_700_000_000_123)
    video = store.add(title="X", playback_url="http://y")
    assert video.id == "1700000000123"


def test_ids_stay_unique_when_clock_stalls():
    """Creations within the same millisecond get increasing ids."""
    store = VideoStore(seed=False, clock=lambda: 5000)
    ids = [store.add(title=f"V{i}", playback_url="http://y").id for i in range(3)]
    assert ids == ["5000", "5001", "5002"]


def test_ids_stay_unique_when_clock_goes_backwards():
    ticks = iter([5000, 4000, 6000])
    store = VideoStore(seed=False, clock=lambda: next(ticks))
    ids = [store.add(title="V", playback_url="http://y").id for _ in range(3)]
    assert ids == ["5000", "5001", "6000"]


def test_optional_fields_default_to_empty():
    store = VideoStore()
    video = store.add(title="X", playback_url="http://y")
    assert video.publisher == ""
    assert video.producer == ""
    assert video.genre == ""
    assert video.age == ""
    assert video.external is False
    assert video.createdAt.tzinfo is not None


@pytest.mark.parametrize(
    "title, playback_url",
    [("", "http://y"), ("X", ""), (None, "http://y"), ("X", None)],
)
def test_add_requires_title_and_url(title, playback_url):
    store = VideoStore()
    with pytest.raises(ValueError):
        store.add(title=title, playback_url=playback_url)
    assert len(store) == 1

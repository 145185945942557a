import pytest
from shared.constants import TrackerKeys
from tracker_reader.domain.models import CountFilter, Granularity
from tracker_reader.infrastructure.redis.keys import KeyBuilder


@pytest.mark.parametrize(
    "namespace,app_id,segments,event_id,expected",
    [
        ("trk", "42", [], None, "trk_42"),
        ("trk", "42", ["events"], None, "trk_42:events"),
        ("trk", "42", ["hashed", "oid"], "signup", "trk_42:signup:hashed:oid"),
        ("trk", "42", [], "signup", "trk_42:signup"),
        ("stats", "app", ["a", "b", "c"], None, "stats_app:a:b:c"),
        ("trk", "7", ["day:20240115", "env:all", "counts"], "all",
         "trk_7:all:day:20240115:env:all:counts"),
    ],
)
def test_build_key(namespace, app_id, segments, event_id, expected):
    assert KeyBuilder(namespace, app_id).build(segments, event_id) == expected


def test_build_does_not_mutate_segments():
    segments = ["hashed", "env"]
    KeyBuilder("trk", "42").build(segments, "signup")
    assert segments == ["hashed", "env"]


def test_empty_event_id_is_kept_as_segment():
    # Only None drops the event segment
    assert KeyBuilder("trk", "42").build(["counts"], "") == "trk_42::counts"


class TestCounterSegments:
    def test_minimal(self):
        segments = KeyBuilder.counter_segments(Granularity.DAY, CountFilter())
        assert segments == ["day", "env:all", "counts"]

    def test_all_dimensions_in_wire_order(self):
        filters = CountFilter(date="2024011509", user="u1", oid="o9", env="prod")
        segments = KeyBuilder.counter_segments(Granularity.HOUR, filters)
        assert segments == [
            "hour:2024011509",
            "user:u1",
            "oid:o9",
            "env:prod",
            "counts",
        ]

    def test_total_drops_date(self):
        filters = CountFilter(date="20240115")
        segments = KeyBuilder.counter_segments(Granularity.TOTAL, filters)
        assert segments == ["total", "env:all", "counts"]

    def test_oid_without_user(self):
        filters = CountFilter(oid="o1")
        segments = KeyBuilder.counter_segments(Granularity.YEAR, filters)
        assert segments == ["year", "oid:o1", "env:all", "counts"]

    def test_counter_key(self):
        key = KeyBuilder("trk", "42").counter_key(
            "signup", Granularity.WEEK, CountFilter(date="202403", env="web")
        )
        assert key == "trk_42:signup:week:202403:env:web:counts"


def test_build_starts_with_tracker_prefix():
    key = KeyBuilder("stats", "shop").build(["events"])
    assert key.startswith(TrackerKeys.prefix("stats", "shop") + ":")

"""Tests for visit tracking and the client-side visit counts."""

from datetime import datetime, timedelta, timezone

from conftest import FakeAPIError


class TestTrackVisit:
    async def test_appends_row(self, gateway, fake):
        await gateway.track_visit("user-1", "/materials")

        row = fake.tables["site_visits"][0]
        assert row["user_id"] == "user-1"
        assert row["page_path"] == "/materials"
        assert datetime.fromisoformat(row["visited_at"]).tzinfo is not None

    async def test_anonymous_visit(self, gateway, fake):
        await gateway.track_visit()
        assert fake.tables["site_visits"][0]["user_id"] is None
        assert fake.tables["site_visits"][0]["page_path"] == "/"

    async def test_failure_is_swallowed(self, gateway, fake):
        fake.failures[("site_visits", "insert")] = FakeAPIError("boom")
        assert await gateway.track_visit("user-1") is None


class TestVisitStats:
    async def test_counts_with_inclusive_boundaries(self, gateway, fake):
        now = datetime(2024, 5, 15, 12, 0).astimezone()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_ago = now - timedelta(days=7)

        timestamps = [
            midnight.isoformat(),                                   # today + week
            (midnight - timedelta(microseconds=1)).isoformat(),     # week
            (now - timedelta(hours=1)).isoformat(),                 # today + week
            (now - timedelta(hours=2)).astimezone(timezone.utc)
                .strftime("%Y-%m-%dT%H:%M:%S.%fZ"),                 # today + week
            week_ago.isoformat(),                                   # week
            (week_ago - timedelta(seconds=1)).isoformat(),          # neither
            (now - timedelta(days=30)).isoformat(),                 # neither
            (now - timedelta(days=3)).astimezone(timezone.utc)
                .replace(tzinfo=None).isoformat(),                  # naive UTC: week
            None,                                                   # total only
        ]
        fake.tables["site_visits"] = [
            {"id": i, "page_path": "/", "visited_at": ts} for i, ts in enumerate(timestamps)
        ]

        stats = await gateway.get_visit_stats(now=now)

        assert stats.total == 9
        assert stats.today == 3
        assert stats.this_week == 6

    async def test_empty_log(self, gateway, fake):
        stats = await gateway.get_visit_stats()
        assert (stats.total, stats.today, stats.this_week) == (0, 0, 0)

    async def test_fetch_error_degrades_to_zero(self, gateway, fake):
        fake.failures[("site_visits", "select")] = FakeAPIError("boom")
        stats = await gateway.get_visit_stats()
        assert stats.total == 0

    async def test_malformed_timestamp_counts_towards_total_only(self, gateway, fake):
        now = datetime(2024, 5, 15, 12, 0).astimezone()
        fake.tables["site_visits"] = [
            {"id": 1, "page_path": "/", "visited_at": (now - timedelta(hours=1)).isoformat()},
            {"id": 2, "page_path": "/", "visited_at": "not-a-timestamp"},
            {"id": 3, "page_path": "/", "visited_at": (now - timedelta(days=2)).isoformat()},
        ]

        stats = await gateway.get_visit_stats(now=now)

        assert stats.total == 3
        assert stats.today == 1
        assert stats.this_week == 2

from gateway.core.results import parse_rows
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.visits.schemas import SiteVisit, VisitStats
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class VisitService:
    def __init__(self, db: SupabaseClient):
        self.db = db

    async def track_visit(self, user_id: Optional[str] = None, page_path: str = "/") -> None:
        """Append a row to site_visits. Best effort: failures are logged, never raised."""
        client = self.db.client
        if client is None:
            return
        try:
            await client.table("site_visits").insert({
                "user_id": user_id,
                "page_path": page_path,
                "visited_at": datetime.now(timezone.utc).isoformat()
            }).execute()
        except Exception as e:
            logger.warning(f"Failed to record visit to {page_path}: {e}")

    async def get_visit_stats(self, now: Optional[datetime] = None) -> VisitStats:
        """
        Count visits: all time, since local midnight, and over the last 7×24 hours.

        The whole log is fetched and scanned client-side. Both lower bounds are
        inclusive. Timestamps without an offset are taken as UTC. Every row counts
        towards the total; rows whose timestamp is unreadable are left out of
        the two windows.
        """
        client = self.db.client
        if client is None:
            return VisitStats()
        try:
            result = await client.table("site_visits").select("*").execute()
            rows = result.data or []
        except Exception as e:
            logger.error(f"Error fetching visits: {e}")
            rows = []
        visits = parse_rows(SiteVisit, rows, "site_visits")

        now = (now or datetime.now()).astimezone()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_ago = now - timedelta(days=7)

        today = this_week = 0
        for visit in visits:
            visited_at = visit.visited_at
            if visited_at is None:
                continue
            if visited_at.tzinfo is None:
                visited_at = visited_at.replace(tzinfo=timezone.utc)
            if visited_at >= midnight:
                today += 1
            if visited_at >= week_ago:
                this_week += 1

        return VisitStats(total=len(rows), today=today, this_week=this_week)

from gateway.core.errors import GatewayError
from gateway.core.results import OperationResult, parse_rows
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.auth.service import AuthService
from gateway.modules.bans.schemas import UserBan, TEMPORARY
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union
import logging

logger = logging.getLogger(__name__)


def compute_ban_until(
    ban_type: str,
    duration: Optional[Union[int, str]],
    now: Optional[datetime] = None
) -> Optional[str]:
    """ISO expiry ``duration`` days from now for temporary bans, else None"""
    if ban_type != TEMPORARY or not duration:
        return None
    now = now or datetime.now(timezone.utc)
    return (now + timedelta(days=int(duration))).isoformat()


class BanService:
    """
    Writes to user_bans and keeps profiles.is_banned in step with it.

    The two writes are sequential PostgREST calls, not a transaction. If the
    flag update fails after the ban row was written, the error is logged and
    returned, and the ban row stays in place.
    """

    def __init__(self, db: SupabaseClient, auth: AuthService):
        self.db = db
        self.auth = auth

    async def ban_user(
        self,
        user_id: str,
        reason: Optional[str],
        ban_type: str,
        duration: Optional[Union[int, str]] = None
    ) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        admin = await self.auth.get_current_user()
        try:
            result = await client.table("user_bans").insert({
                "user_id": user_id,
                "banned_by": admin.id if admin else None,
                "reason": reason,
                "ban_type": ban_type,
                "ban_until": compute_ban_until(ban_type, duration),
                "is_active": True
            }).execute()
        except Exception as e:
            logger.error(f"Error banning user {user_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))

        try:
            await client.table("profiles")\
                .update({"is_banned": True})\
                .eq("id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Ban recorded for user {user_id} but is_banned flag not set: {e}")
            return OperationResult(data=result.data, error=GatewayError.remote(e))
        logger.info(f"User {user_id} banned ({ban_type})")
        return OperationResult.success(result.data)

    async def unban_user(self, user_id: str) -> OperationResult:
        """Deactivate every active ban of the user, then clear the profile flag"""
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            await client.table("user_bans")\
                .update({"is_active": False})\
                .eq("user_id", user_id)\
                .eq("is_active", True)\
                .execute()
        except Exception as e:
            logger.error(f"Error deactivating bans for user {user_id}: {e}")

        try:
            result = await client.table("profiles")\
                .update({"is_banned": False})\
                .eq("id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error clearing is_banned for user {user_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        logger.info(f"User {user_id} unbanned")
        return OperationResult.success(result.data)

    async def get_user_ban_history(self, user_id: str) -> List[UserBan]:
        """All bans of a user, newest first"""
        client = self.db.client
        if client is None:
            return []
        try:
            result = await client.table("user_bans")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return parse_rows(UserBan, result.data, "user_bans")
        except Exception as e:
            logger.error(f"Error fetching ban history for user {user_id}: {e}")
            return []

from gateway.core.errors import GatewayError
from gateway.core.results import OperationResult, parse_rows
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.admin.schemas import AdminUser, BanStatus
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class AdminService:
    """Reports what the backend decided about the caller; makes no decisions itself."""

    def __init__(self, db: SupabaseClient):
        self.db = db

    async def is_admin(self) -> bool:
        """True only when ``check_is_admin`` returned exactly ``true``"""
        client = self.db.client
        if client is None:
            return False
        try:
            result = await client.rpc("check_is_admin").execute()
        except Exception as e:
            logger.error(f"Error checking admin: {e}")
            return False
        return result.data is True

    async def check_user_ban(self) -> Optional[BanStatus]:
        """Ban status of the signed-in user, or None"""
        client = self.db.client
        if client is None:
            return None
        try:
            result = await client.rpc("get_user_ban_status").execute()
            data = result.data
            # Set-returning functions come back as a list of rows
            if isinstance(data, list):
                data = data[0] if data else None
            return BanStatus(**data) if data else None
        except Exception as e:
            logger.error(f"Error checking ban: {e}")
            return None

    async def get_all_users(self) -> List[AdminUser]:
        """All user profiles as seen by an admin"""
        client = self.db.client
        if client is None:
            return []
        try:
            result = await client.rpc("get_all_users_admin").execute()
            return parse_rows(AdminUser, result.data, "users")
        except Exception as e:
            logger.error(f"Error fetching users: {e}")
            return []

    async def update_user_role(self, user_id: str, role: str) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            result = await client.table("profiles")\
                .update({"role": role})\
                .eq("id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating role for user {user_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

from gateway.core.errors import GatewayError
from gateway.core.results import OperationResult
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.auth.service import AuthService
from gateway.modules.profiles.schemas import Profile
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, db: SupabaseClient, auth: AuthService):
        self.db = db
        self.auth = auth

    async def get_user_profile(self, user_id: str) -> Optional[Profile]:
        """Get profile by user ID via the get_user_profile RPC"""
        client = self.db.client
        if client is None:
            return None
        try:
            result = await client.rpc("get_user_profile", {"user_id": user_id}).execute()
            data = result.data
            if isinstance(data, list):
                data = data[0] if data else None
            return Profile(**data) if data else None
        except Exception as e:
            logger.error(f"Error fetching profile: {e}")
            return None

    async def update_profile(self, updates: Dict[str, Any]) -> OperationResult:
        """Partially update the signed-in user's profile"""
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        user = await self.auth.get_current_user()
        if not user:
            return OperationResult.failure(GatewayError.not_authenticated())
        try:
            result = await client.table("profiles")\
                .update(updates)\
                .eq("id", user.id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating profile {user.id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

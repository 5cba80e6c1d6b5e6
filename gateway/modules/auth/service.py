from gateway.config import Settings
from gateway.core.errors import GatewayError
from gateway.core.results import OperationResult
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.admin.service import AdminService
from gateway.modules.visits.service import VisitService
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)

LANDING_PATH = "/"


class AuthService:
    def __init__(
        self,
        db: SupabaseClient,
        admin: AdminService,
        visits: VisitService,
        settings: Settings,
    ):
        self.db = db
        self.admin = admin
        self.visits = visits
        self.settings = settings

    async def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> OperationResult:
        """Register a new user with Supabase Auth"""
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            response = await client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {
                    "data": {"full_name": full_name}
                }
            })
        except Exception as e:
            logger.error(f"Sign up failed for {email}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(response)

    async def sign_in(self, email: str, password: str, page_path: str = "/") -> OperationResult:
        """
        Sign in with email and password.

        A banned account is signed straight back out and the result carries a
        suspension error instead of the session. Otherwise one visit is
        recorded for the page the sign in came from.
        """
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            response = await client.auth.sign_in_with_password({
                "email": email,
                "password": password
            })
        except Exception as e:
            logger.info(f"Sign in rejected for {email}: {e}")
            return OperationResult.failure(GatewayError.remote(e))

        if response.user:
            ban = await self.admin.check_user_ban()
            if ban and ban.is_active:
                logger.info(f"Suspended user {response.user.id} signed in; revoking session")
                await self.sign_out()
                return OperationResult.failure(
                    GatewayError.suspended(ban.reason, ban.ban_until, self.settings.ban_date_format)
                )
            await self.visits.track_visit(response.user.id, page_path)

        return OperationResult.success(response)

    async def sign_out(self) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            await client.auth.sign_out()
        except Exception as e:
            logger.error(f"Sign out failed: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success()

    async def set_session(self, access_token: str, refresh_token: Optional[str] = None) -> OperationResult:
        """Adopt a session issued earlier by sign_in (e.g. a caller's bearer token)"""
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            response = await client.auth.set_session(access_token, refresh_token or "")
        except Exception as e:
            logger.info(f"Rejected session token: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(response)

    async def handle_logout(self) -> str:
        """Sign out and return the path the browser should land on"""
        await self.sign_out()
        return LANDING_PATH

    async def get_current_user(self) -> Optional[Any]:
        """User behind the current session, or None"""
        client = self.db.client
        if client is None:
            return None
        try:
            response = await client.auth.get_user()
        except Exception as e:
            logger.error(f"Error resolving current user: {e}")
            return None
        return response.user if response else None

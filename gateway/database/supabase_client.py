import logging
from typing import Awaitable, Callable, Optional

from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from gateway.config import Settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, str], Awaitable[AsyncClient]]


async def create_request_client(supabase_url: str, supabase_key: str) -> AsyncClient:
    """Short-lived client for one HTTP request: no session storage, no refresh timer."""
    return await acreate_client(
        supabase_url,
        supabase_key,
        options=AsyncClientOptions(auto_refresh_token=False, persist_session=False),
    )


class SupabaseClient:
    """Holds the async Supabase client for one gateway instance.

    The client is created on the first ``init()`` call, and only when the
    URL, the public key and a client factory are all available. Until then
    ``client`` is ``None`` and callers report "not configured".
    """

    def __init__(self, settings: Settings, client_factory: Optional[ClientFactory] = acreate_client):
        self.settings = settings
        self.client_factory = client_factory
        self._client: Optional[AsyncClient] = None

    @property
    def client(self) -> Optional[AsyncClient]:
        return self._client

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def init(self) -> Optional[AsyncClient]:
        if self._client is None:
            if not self.settings.is_configured or self.client_factory is None:
                logger.debug("Supabase URL, key or client factory missing; gateway disabled")
                return None
            self._client = await self.client_factory(
                self.settings.supabase_url, self.settings.supabase_key
            )
            logger.debug("Supabase client initialized for %s", self.settings.supabase_url)
        return self._client

    def reset_client(self):
        self._client = None

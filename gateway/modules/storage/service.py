from gateway.config import Settings
from gateway.core.errors import GatewayError
from gateway.core.results import UploadResult
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.auth.service import AuthService
from gateway.modules.profiles.service import ProfileService
from gateway.modules.storage.schemas import FileUpload
from typing import Optional
import logging
import re
import time

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.]")


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def image_file_name(filename: str) -> str:
    """``<epoch ms>-<name>`` with everything outside [a-zA-Z0-9.] replaced by ``_``"""
    return f"{_timestamp_ms()}-{_UNSAFE_CHARS.sub('_', filename)}"


def avatar_file_name(user_id: str, filename: str) -> str:
    """``<user id>-<epoch ms>.<extension>``"""
    return f"{user_id}-{_timestamp_ms()}.{filename.rsplit('.', 1)[-1]}"


class StorageService:
    def __init__(
        self,
        db: SupabaseClient,
        auth: AuthService,
        profiles: ProfileService,
        settings: Settings,
    ):
        self.db = db
        self.auth = auth
        self.profiles = profiles
        self.settings = settings

    async def upload_image(self, file: FileUpload, bucket: Optional[str] = None) -> UploadResult:
        """Upload an image and return its public URL"""
        client = self.db.client
        if client is None:
            return UploadResult(error=GatewayError.not_configured())
        bucket = bucket or self.settings.material_images_bucket
        file_name = image_file_name(file.filename)
        try:
            await client.storage.from_(bucket).upload(
                file_name,
                file.content,
                file_options=self._file_options(file)
            )
        except Exception as e:
            logger.error(f"Upload of {file_name} to {bucket} failed: {e}")
            return UploadResult(error=GatewayError.remote(e))
        logger.info(f"Uploaded {file_name} to {bucket}")
        return UploadResult(url=await self._public_url(bucket, file_name))

    async def upload_avatar(self, file: FileUpload) -> UploadResult:
        """Upload the signed-in user's avatar and store its URL on the profile"""
        client = self.db.client
        if client is None:
            return UploadResult(error=GatewayError.not_configured())
        user = await self.auth.get_current_user()
        if not user:
            return UploadResult(error=GatewayError.not_authenticated())
        bucket = self.settings.avatars_bucket
        file_name = avatar_file_name(user.id, file.filename)
        try:
            await client.storage.from_(bucket).upload(
                file_name,
                file.content,
                file_options=self._file_options(file, upsert=True)
            )
        except Exception as e:
            logger.error(f"Avatar upload for {user.id} failed: {e}")
            return UploadResult(error=GatewayError.remote(e))
        url = await self._public_url(bucket, file_name)
        await self.profiles.update_profile({"avatar_url": url})
        return UploadResult(url=url)

    async def _public_url(self, bucket: str, file_name: str) -> str:
        return await self.db.client.storage.from_(bucket).get_public_url(file_name)

    @staticmethod
    def _file_options(file: FileUpload, upsert: bool = False) -> dict:
        options = {}
        if file.content_type:
            options["content-type"] = file.content_type
        if upsert:
            options["upsert"] = "true"
        return options

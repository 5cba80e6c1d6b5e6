"""
Backend gateway facade.

One ``BackendGateway`` owns one Supabase client handle and exposes every
operation as a coroutine method. Build it from a ``Settings`` instance and
call ``init()`` once; until the client exists every operation answers with a
"not configured" result and makes no network call.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from supabase import acreate_client

from gateway.config import Settings, settings as default_settings
from gateway.core.results import OperationResult, UploadResult
from gateway.database.supabase_client import ClientFactory, SupabaseClient
from gateway.modules.admin.schemas import AdminUser, BanStatus
from gateway.modules.admin.service import AdminService
from gateway.modules.auth.service import AuthService
from gateway.modules.bans.schemas import UserBan
from gateway.modules.bans.service import BanService
from gateway.modules.categories.schemas import Category
from gateway.modules.categories.service import CategoryService
from gateway.modules.materials.schemas import Material
from gateway.modules.materials.service import MaterialService
from gateway.modules.profiles.schemas import Profile
from gateway.modules.profiles.service import ProfileService
from gateway.modules.storage.schemas import FileUpload
from gateway.modules.storage.service import StorageService
from gateway.modules.visits.schemas import VisitStats
from gateway.modules.visits.service import VisitService


class BackendGateway:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Optional[ClientFactory] = acreate_client,
    ):
        self.settings = settings or default_settings
        self.db = SupabaseClient(self.settings, client_factory)

        self.admin = AdminService(self.db)
        self.visits = VisitService(self.db)
        self.auth = AuthService(self.db, self.admin, self.visits, self.settings)
        self.profiles = ProfileService(self.db, self.auth)
        self.categories = CategoryService(self.db)
        self.materials = MaterialService(self.db, self.auth)
        self.storage = StorageService(self.db, self.auth, self.profiles, self.settings)
        self.bans = BanService(self.db, self.auth)

    # Client lifecycle

    async def init(self):
        return await self.db.init()

    def reset(self):
        self.db.reset_client()

    @property
    def is_configured(self) -> bool:
        return self.db.is_configured

    # Auth

    async def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> OperationResult:
        return await self.auth.sign_up(email, password, full_name)

    async def sign_in(self, email: str, password: str, page_path: str = "/") -> OperationResult:
        return await self.auth.sign_in(email, password, page_path)

    async def sign_out(self) -> OperationResult:
        return await self.auth.sign_out()

    async def set_session(self, access_token: str, refresh_token: Optional[str] = None) -> OperationResult:
        return await self.auth.set_session(access_token, refresh_token)

    async def handle_logout(self) -> str:
        return await self.auth.handle_logout()

    async def get_current_user(self):
        return await self.auth.get_current_user()

    # Profiles

    async def get_user_profile(self, user_id: str) -> Optional[Profile]:
        return await self.profiles.get_user_profile(user_id)

    async def update_profile(self, updates: Dict[str, Any]) -> OperationResult:
        return await self.profiles.update_profile(updates)

    # Admin checks

    async def is_admin(self) -> bool:
        return await self.admin.is_admin()

    async def check_user_ban(self) -> Optional[BanStatus]:
        return await self.admin.check_user_ban()

    async def get_all_users(self) -> List[AdminUser]:
        return await self.admin.get_all_users()

    async def update_user_role(self, user_id: str, role: str) -> OperationResult:
        return await self.admin.update_user_role(user_id, role)

    # Categories

    async def get_categories(self) -> List[Category]:
        return await self.categories.get_categories()

    async def add_category(
        self,
        name: str,
        slug: str,
        icon: Optional[str] = None,
        description: Optional[str] = None
    ) -> OperationResult:
        return await self.categories.add_category(name, slug, icon, description)

    async def update_category(self, category_id: Any, updates: Dict[str, Any]) -> OperationResult:
        return await self.categories.update_category(category_id, updates)

    async def delete_category(self, category_id: Any) -> OperationResult:
        return await self.categories.delete_category(category_id)

    # Materials

    async def get_materials(self) -> List[Material]:
        return await self.materials.get_materials()

    async def get_all_materials(self) -> List[Material]:
        return await self.materials.get_all_materials()

    async def add_material(
        self,
        title: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        telegram_link: Optional[str] = None,
        category: Optional[str] = None
    ) -> OperationResult:
        return await self.materials.add_material(title, description, image_url, telegram_link, category)

    async def update_material(self, material_id: Any, updates: Dict[str, Any]) -> OperationResult:
        return await self.materials.update_material(material_id, updates)

    async def delete_material(self, material_id: Any) -> OperationResult:
        return await self.materials.delete_material(material_id)

    # Storage

    async def upload_image(self, file: FileUpload, bucket: Optional[str] = None) -> UploadResult:
        return await self.storage.upload_image(file, bucket)

    async def upload_avatar(self, file: FileUpload) -> UploadResult:
        return await self.storage.upload_avatar(file)

    # Bans

    async def ban_user(
        self,
        user_id: str,
        reason: Optional[str],
        ban_type: str,
        duration: Optional[Union[int, str]] = None
    ) -> OperationResult:
        return await self.bans.ban_user(user_id, reason, ban_type, duration)

    async def unban_user(self, user_id: str) -> OperationResult:
        return await self.bans.unban_user(user_id)

    async def get_user_ban_history(self, user_id: str) -> List[UserBan]:
        return await self.bans.get_user_ban_history(user_id)

    # Visits

    async def track_visit(self, user_id: Optional[str] = None, page_path: str = "/") -> None:
        await self.visits.track_visit(user_id, page_path)

    async def get_visit_stats(self, now: Optional[datetime] = None) -> VisitStats:
        return await self.visits.get_visit_stats(now)

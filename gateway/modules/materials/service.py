from gateway.core.errors import GatewayError
from gateway.core.results import OperationResult, parse_rows
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.auth.service import AuthService
from gateway.modules.materials.schemas import Material, PUBLISHED
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class MaterialService:
    def __init__(self, db: SupabaseClient, auth: AuthService):
        self.db = db
        self.auth = auth

    async def get_materials(self) -> List[Material]:
        """Published materials, newest first"""
        return await self._list_materials(status=PUBLISHED)

    async def get_all_materials(self) -> List[Material]:
        """Every material regardless of status, newest first"""
        return await self._list_materials()

    async def _list_materials(self, status: Optional[str] = None) -> List[Material]:
        client = self.db.client
        if client is None:
            return []
        try:
            query = client.table("materials").select("*")
            if status:
                query = query.eq("status", status)
            result = await query.order("created_at", desc=True).execute()
            return parse_rows(Material, result.data, "materials")
        except Exception as e:
            logger.error(f"Error fetching materials: {e}")
            return []

    async def add_material(
        self,
        title: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        telegram_link: Optional[str] = None,
        category: Optional[str] = None
    ) -> OperationResult:
        """Publish a material; created_by is the signed-in user when there is one"""
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        user = await self.auth.get_current_user()
        try:
            result = await client.table("materials").insert({
                "title": title,
                "description": description,
                "image_url": image_url,
                "telegram_link": telegram_link,
                "category": category,
                "created_by": user.id if user else None,
                "status": PUBLISHED
            }).execute()
        except Exception as e:
            logger.error(f"Error adding material {title!r}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

    async def update_material(self, material_id: Any, updates: Dict[str, Any]) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            result = await client.table("materials")\
                .update(updates)\
                .eq("id", material_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating material {material_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

    async def delete_material(self, material_id: Any) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            result = await client.table("materials")\
                .delete()\
                .eq("id", material_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting material {material_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

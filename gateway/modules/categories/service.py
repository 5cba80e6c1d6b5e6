from gateway.core.errors import GatewayError
from gateway.core.results import OperationResult, parse_rows
from gateway.database.supabase_client import SupabaseClient
from gateway.modules.categories.schemas import Category
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: SupabaseClient):
        self.db = db

    async def get_categories(self) -> List[Category]:
        """List all categories by name"""
        client = self.db.client
        if client is None:
            return []
        try:
            result = await client.table("categories")\
                .select("*")\
                .order("name")\
                .execute()
            return parse_rows(Category, result.data, "categories")
        except Exception as e:
            logger.error(f"Error fetching categories: {e}")
            return []

    async def add_category(
        self,
        name: str,
        slug: str,
        icon: Optional[str] = None,
        description: Optional[str] = None
    ) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            result = await client.table("categories").insert({
                "name": name,
                "slug": slug,
                "icon": icon,
                "description": description
            }).execute()
        except Exception as e:
            logger.error(f"Error adding category {slug}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

    async def update_category(self, category_id: Any, updates: Dict[str, Any]) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            result = await client.table("categories")\
                .update(updates)\
                .eq("id", category_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating category {category_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

    async def delete_category(self, category_id: Any) -> OperationResult:
        client = self.db.client
        if client is None:
            return OperationResult.failure(GatewayError.not_configured())
        try:
            result = await client.table("categories")\
                .delete()\
                .eq("id", category_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting category {category_id}: {e}")
            return OperationResult.failure(GatewayError.remote(e))
        return OperationResult.success(result.data)

from typing import Any, Iterable, List, Optional, Type, TypeVar
import logging

from pydantic import BaseModel, ValidationError

from gateway.core.errors import GatewayError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class OperationResult(BaseModel):
    """``{data, error}`` pair returned by mutating operations."""

    data: Any = None
    error: Optional[GatewayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None) -> "OperationResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: GatewayError) -> "OperationResult":
        return cls(error=error)


class UploadResult(BaseModel):
    """``{url, error}`` pair returned by uploads."""

    url: Optional[str] = None
    error: Optional[GatewayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_rows(model: Type[ModelT], rows: Optional[Iterable[dict]], table: str) -> List[ModelT]:
    """Validate each row on its own; rows that don't fit ``model`` are logged and skipped."""
    parsed = []
    for row in rows or []:
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping malformed {table} row: {e}")
    return parsed

"""Auth Schemas: admin check and database diagnostic payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AdminCheckResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_admin: bool


class TableStatus(BaseModel):
    exists: bool
    columns: list[str] | None = None


class DatabaseInventory(BaseModel):
    """Result of GET /api/auth/test-db."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    database_path: str
    database_exists: bool = True
    tables: dict[str, TableStatus]

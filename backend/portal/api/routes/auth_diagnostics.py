"""Auth Diagnostics: development inspection of the sqlite file behind DATABASE_URL.

Invariants:
    - Missing database file -> 404 with the resolved path, file never created
    - Inspection failures -> 500 carrying the driver message (diagnostic route)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portal.config import Settings, database_file_path, get_settings
from portal.core.errors import DatabaseError, ResourceNotFoundError
from portal.schemas.auth import DatabaseInventory
from portal.services.database_inventory import database_exists, inspect_tables

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth-diagnostics"])


@router.get(
    "/test-db", response_model=DatabaseInventory, response_model_exclude_none=True,
)
def test_database(settings: Settings = Depends(get_settings)):
    """Inventory the auth tables and their columns."""
    path = database_file_path(settings.database_url)
    if not database_exists(path):
        body = ResourceNotFoundError("Database file", path).to_response()
        body["path"] = path
        return JSONResponse(status_code=404, content=body)

    try:
        tables = inspect_tables(path)
    except SQLAlchemyError as e:
        logger.error(f"Database inspection failed: {e}", exc_info=True)
        raise DatabaseError(f"Database inspection failed: {e}", "inspect")
    return DatabaseInventory(database_path=path, tables=tables)

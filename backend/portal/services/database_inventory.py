"""Database Inventory: report which sign-in tables exist in the sqlite file.

Invariants:
    - Never creates the database file; a missing file is reported, not touched
    - Uses a short-lived sync engine on the file path, disposed before returning
"""

from pathlib import Path

from sqlalchemy import create_engine, inspect

from portal.db.base import TABLE_PREFIX

INVENTORY_TABLES = (
    f"{TABLE_PREFIX}user",
    f"{TABLE_PREFIX}account",
    f"{TABLE_PREFIX}session",
    f"{TABLE_PREFIX}verification",
)


def database_exists(path: str) -> bool:
    return Path(path).is_file()


def inspect_tables(path: str) -> dict[str, dict]:
    """Map each inventory table to {"exists": bool, "columns": [...]}."""
    # mode=ro keeps sqlite from creating the file as a side effect
    engine = create_engine(
        f"sqlite:///file:{Path(path).resolve()}?mode=ro&uri=true",
    )
    try:
        inspector = inspect(engine)
        existing = set(inspector.get_table_names())
        status: dict[str, dict] = {}
        for table in INVENTORY_TABLES:
            if table in existing:
                status[table] = {
                    "exists": True,
                    "columns": [c["name"] for c in inspector.get_columns(table)],
                }
            else:
                status[table] = {"exists": False}
        return status
    finally:
        engine.dispose()

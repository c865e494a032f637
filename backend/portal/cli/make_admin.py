"""make-admin: promote an existing user to the admin role.

Usage:
    make-admin <email>

Exit codes: 0 on success, 1 on missing argument, missing database file,
unknown user or database error. A missing sqlite file is never created.
"""

import argparse
import asyncio
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from portal.config import async_database_url, database_file_path, get_settings
from portal.core.errors import DatabaseError, ResourceNotFoundError
from portal.db.session import create_session_factory
from portal.services.admin_promotion import promote_to_admin
from portal.services.database_inventory import database_exists

logger = logging.getLogger(__name__)


def _missing_sqlite_file(database_url: str) -> str | None:
    """Path of a sqlite file that does not exist yet, else None."""
    if not async_database_url(database_url).startswith("sqlite"):
        return None
    path = database_file_path(database_url)
    if path == ":memory:" or database_exists(path):
        return None
    return path


async def make_admin(email: str, database_url: str) -> int:
    # aiosqlite would create an empty file on connect
    missing = _missing_sqlite_file(database_url)
    if missing is not None:
        print(f"Database file does not exist: {missing}", file=sys.stderr)
        return 1

    engine, session_factory = create_session_factory(database_url)
    try:
        print(f"Looking for user with email: {email}")
        async with session_factory() as db:
            await promote_to_admin(db, email)
    except ResourceNotFoundError:
        print(f"No user found with email: {email}", file=sys.stderr)
        return 1
    except (SQLAlchemyError, DatabaseError) as e:
        logger.error(f"Error making user admin: {e}", exc_info=True)
        print(f"Error making user admin: {e}", file=sys.stderr)
        return 1
    finally:
        await engine.dispose()

    print(f"Successfully made {email} an admin")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="make-admin", description="Promote a user to admin by email.",
    )
    parser.add_argument("email", nargs="?", help="Email of the user to promote")
    args = parser.parse_args(argv)

    if not args.email:
        print("Please provide an email address", file=sys.stderr)
        print("Usage: make-admin <email>", file=sys.stderr)
        return 1

    return asyncio.run(make_admin(args.email, get_settings().database_url))


if __name__ == "__main__":
    sys.exit(main())

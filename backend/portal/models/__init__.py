"""ORM Models: SQLAlchemy declarative models for all portal entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns Books; every Book-scoped row carries book_id
    - Account and Verification belong to the sign-in flow and are read-only here

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from portal.models.user import User  # noqa: F401
from portal.models.auth_session import AuthSession  # noqa: F401
from portal.models.book import Book  # noqa: F401
from portal.models.book_feature import BookFeature  # noqa: F401
from portal.models.asset import MarketingAsset, BookCover, LandingPage  # noqa: F401
from portal.models.auth_account import Account, Verification  # noqa: F401
from portal.models.purchase import Purchase  # noqa: F401

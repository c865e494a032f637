"""Database Infrastructure: async session factory and SQLAlchemy Base.

Invariants:
    - Single async engine per process for the served app (infrastructure/database.py)
    - Scripts build their own factory via db.session.create_session_factory
"""

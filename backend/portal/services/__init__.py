"""Services: persistence and integration logic called by routes and scripts.

Invariants:
    - Services take an AsyncSession (or settings) explicitly; no module globals
    - Authorization decisions come from core/authorization.py
"""

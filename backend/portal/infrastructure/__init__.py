"""Infrastructure Layer: database, email provider and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - External failures mapped to core/errors.py types or propagated unchanged
"""

"""Core: pure domain types, errors and authorization checks (no IO)."""

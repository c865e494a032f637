"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - JSON keys are camelCase (alias_generator) to match the web client
    - ORM rows are validated with from_attributes; schemas never touch the DB
"""

"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Request bodies declare their required fields; unknown keys are ignored
    - Response models declare exactly the fields a client sees (extras never leak)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

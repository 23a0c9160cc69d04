"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All database failures are mapped to core.errors.DatabaseError
"""

"""Database Infrastructure — declarative base and seed loader.

Invariants:
    - Schema is created from Base.metadata (no migrations)
    - Seeding goes through the ORM, never raw SQL
"""

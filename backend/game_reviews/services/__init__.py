"""Services Layer — data access per entity plus the existence checker.

Invariants:
    - One query class per entity, constructed with the request's AsyncSession
    - Only services/ issues SQL; routes never build statements
    - Mutating methods commit; read methods never do
"""

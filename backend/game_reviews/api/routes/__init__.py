"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes orchestrate validation, existence checks and service calls; SQL lives in services/

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""

"""Endpoint Catalogue — GET /api serves a JSON description of every endpoint.

Invariants:
    - Served verbatim from api/endpoints.json (read once, cached)
"""

import json
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["meta"])

ENDPOINTS_FILE = Path(__file__).resolve().parent.parent / "endpoints.json"


@lru_cache
def load_endpoints() -> dict:
    return json.loads(ENDPOINTS_FILE.read_text(encoding="utf-8"))


@router.get("")
async def get_endpoints():
    """Describe all available endpoints."""
    return load_endpoints()

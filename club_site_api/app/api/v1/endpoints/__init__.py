"""
Endpoint modules for API v1.

Each module defines an ``APIRouter`` for one entity; ``crud`` holds the
item routes they share.  The routers are aggregated in ``router.py``.
"""

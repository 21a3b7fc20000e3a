"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (auth, events,
users, docs); the routers are aggregated in ``router.py``.
"""

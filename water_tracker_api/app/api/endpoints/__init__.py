"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (accounts, water counters).  The routers are aggregated in
``api/router.py``.
"""

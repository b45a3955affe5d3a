"""Route Modules — one file per upstream resource.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes contain no mapping logic (delegate to services.proxy.relay)
"""

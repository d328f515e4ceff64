"""
Endpoint subpackage.

Each module defines an APIRouter for a specific domain (users, orders)
plus the shared health check.  The application factories in
``shop_services.main`` decide which routers a service mounts.
"""

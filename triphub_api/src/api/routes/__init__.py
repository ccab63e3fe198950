"""
API route modules.

This package contains subrouters for:
- Trips: trip CRUD backed by the generic entity access helpers

Routers are included from src.api.main (under the /api/v1 prefix).
"""

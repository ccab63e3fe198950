"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Schemas are grouped by domain module and also include common reusable models
such as the standard message and error envelopes.
"""

from .common import MessageResponse  # noqa: F401

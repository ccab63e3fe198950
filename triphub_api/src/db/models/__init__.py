"""
ORM models for domain entities.

Importing this package ensures model classes are registered with the Base
metadata before the schema is created.
"""

from .trip import Trip  # noqa: F401

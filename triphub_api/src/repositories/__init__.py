"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each entity kind and implement
the Repository protocol consumed by src.services.entity_access.
"""

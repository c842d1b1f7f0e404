"""Data stores for persistence and caching.

Stores handle:
- PostgreSQL: DB session, ORM operations
- Redis: caching with TTL policies

No board logic in stores - that belongs in services.
"""

"""Data stores for persistence and sessions.

Stores handle:
- PostgreSQL: DB session (one transaction per request), connection pool
- Redis: login sessions with TTL

No business/ranking logic in stores - that belongs in services.
"""

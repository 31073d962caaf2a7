"""Business logic services.

Services contain all business logic and are called by routes. Each public
service call owns one database transaction; helpers that take a session
(aggregates, fill) run inside the caller's transaction. Ranking is pure.
"""

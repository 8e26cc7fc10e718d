"""Persistence: engine, ORM models, and repositories."""

"""Persistence layer: database plumbing, ORM models and repositories."""

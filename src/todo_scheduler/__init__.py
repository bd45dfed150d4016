"""Persistence layer of the todo scheduler: a single SQLite table of scheduled tasks."""

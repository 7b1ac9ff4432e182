"""Shared infrastructure: database, models, errors, logging and tracing."""

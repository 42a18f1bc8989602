"""Observability – structured logging for the dispatch pipeline."""

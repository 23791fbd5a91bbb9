"""Logging configuration helpers scoped to the filecount namespace."""

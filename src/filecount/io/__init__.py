"""Filesystem side: traversal, per-file tasks and line counting."""

"""Rendering backends for summary documents (HTML page, rich terminal view)."""

"""Paper endpoints."""

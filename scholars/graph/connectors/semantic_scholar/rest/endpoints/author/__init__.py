"""Author endpoints."""

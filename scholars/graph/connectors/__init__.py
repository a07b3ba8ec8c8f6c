"""Connector namespace for API-specific implementations.

Architecture:
    Connectors are organized by API: `connectors/<api>/rest`.
    Each connector is self-contained with endpoint definitions and adapters.
"""

__all__: list[str] = []

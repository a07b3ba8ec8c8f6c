"""Shared Semantic Scholar connector constants.

This module centralizes the base URL, authentication settings and URL
templates used by the REST endpoints and clients.
"""

# Academic Graph REST base URL
BASE_URL = "https://api.semanticscholar.org/graph/v1/"

# Optional API key, sent with every request when set
API_KEY_ENV = "SEMANTIC_SCHOLAR_API_KEY"
API_KEY_HEADER = "x-api-key"

# Seconds before a request is abandoned
DEFAULT_TIMEOUT = 30.0

# URL templates, relative to BASE_URL
URL_TEMPLATES = {
    "author": "author/{author_id}",
    "author_papers": "author/{author_id}/papers",
    "author_search": "author/search",
    "paper": "paper/{paper_id}",
    "paper_authors": "paper/{paper_id}/authors",
    "paper_citations": "paper/{paper_id}/citations",
    "paper_references": "paper/{paper_id}/references",
    "paper_search": "paper/search",
}

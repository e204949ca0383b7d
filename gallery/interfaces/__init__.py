"""Transport adapters (HTTP API and HTML pages)."""

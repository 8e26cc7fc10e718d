"""Infrastructure: cache, persistence, and store adapters."""

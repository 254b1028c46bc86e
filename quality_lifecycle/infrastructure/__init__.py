"""Infrastructure adapters: observability and in-memory collaborators."""

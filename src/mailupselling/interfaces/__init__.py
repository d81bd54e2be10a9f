"""Process entry points: HTTP API and worker CLI."""

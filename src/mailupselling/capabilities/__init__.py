"""Feature capabilities."""

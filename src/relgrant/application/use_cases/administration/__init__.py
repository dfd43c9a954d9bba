"""Administration use cases."""

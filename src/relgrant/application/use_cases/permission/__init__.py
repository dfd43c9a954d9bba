"""Permission use cases."""

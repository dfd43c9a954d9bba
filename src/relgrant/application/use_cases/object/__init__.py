"""Object use cases."""

"""Application layer - ports, use cases and the authorization engine."""

"""Use cases behind the authorization engine operations."""

"""Domain layer - tuples, roles, permissions and errors."""

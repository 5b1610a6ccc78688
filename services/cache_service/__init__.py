"""Plugin-scoped cache facade and its backends."""

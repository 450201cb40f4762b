"""Application layer – response caching and use-case services."""

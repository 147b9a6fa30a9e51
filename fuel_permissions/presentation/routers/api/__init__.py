"""Versioned API routers and shared request dependencies."""

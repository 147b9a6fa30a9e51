"""Presentation layer (FastAPI routers and dependencies)."""

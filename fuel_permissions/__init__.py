"""Fuel permissions: role-based, group-aware authorization engine.

Layers:
- core: Result types, errors, settings, dependency container
- domain: enums, policy tuples, protocols (ports)
- infrastructure: permissions engine, policy stores, logging, persistence
- presentation: FastAPI dependencies and admin routes
"""

"""Test suite for the permissions engine.

Test structure follows the test pyramid:
- unit/: Unit tests - engine, snapshot, role table, config, container
- integration/: Integration tests - SQLAlchemy store on real SQLite files
- api/: API tests - FastAPI dependencies and admin routes via TestClient
"""

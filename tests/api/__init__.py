"""API tests package.

Request/response tests through TestClient covering subject resolution,
authorization dependencies, admin routes and HTTP status codes.
"""

"""Application package for the users/projects CRUD API.

This package exposes the repository, gate and route modules used by
the FastAPI application. It is intentionally lightweight; individual
modules contain the concrete implementations and documentation.
"""

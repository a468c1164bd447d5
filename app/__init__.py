"""
Library Books API Application Package

A small REST service over an in-memory collection of books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: Book record and seed data
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (the in-memory book store)
"""

__version__ = "1.0.0"

"""
Schemas Package for the Café App
================================

Pydantic models for request bodies.

- **auth.py**: Login credentials (POST /login)

Naming Conventions:
-------------------
- *Request: Request bodies (e.g., LoginRequest)
"""

from .auth import LoginRequest

__all__ = ["LoginRequest"]

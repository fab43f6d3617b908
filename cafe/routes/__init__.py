"""
Routes Package for the Café App
===============================

Each module defines an APIRouter; main.create_app() includes them all at the
root path.

- shop.py: Menu listing and product detail pages
- auth.py: Login form/submission and the username cookie echo
"""

from .shop import shop_router
from .auth import auth_router

__all__ = [
    "shop_router",
    "auth_router",
]

"""
Services Package for the Café App
=================================

The data access facade used by the route handlers. Every function takes the
request's SQLAlchemy Session as its first argument and returns ORM objects
(or None when nothing matches).

Available Services:
-------------------
- **catalog**: Product listing and lookup
- **accounts**: User lookup, session token generation and session storage

Usage:
------
    from cafe.services import catalog, accounts

    products = catalog.get_products(db)
    user = accounts.get_user_by_session_token(db, token)
"""

from . import catalog
from . import accounts

__all__ = ["catalog", "accounts"]

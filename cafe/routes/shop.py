"""
Shop Routes for the Café App
============================

Customer-facing menu pages.

Endpoints:
----------
- GET /: Menu listing, greeting the logged-in user if the session cookie
  resolves to one
- GET /product/{product_id}: Detail page for one product

Both pages are public; the session cookie only changes the greeting.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Request
from sqlalchemy.orm import Session

from ..config import SESSION_COOKIE_NAME
from ..db import get_db
from ..services import accounts, catalog
from ..templating import templates


logger = logging.getLogger(__name__)

# Router definition
shop_router = APIRouter(tags=["Shop"])


@shop_router.get("/", include_in_schema=False)
def index(
    request: Request,
    session_token: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    db: Session = Depends(get_db),
):
    """Render the menu with every product and the current user (if any)."""
    products = catalog.get_products(db)
    user = accounts.get_user_by_session_token(db, session_token)

    return templates.TemplateResponse(
        request,
        "index.html",
        {"products": products, "user": user},
    )


@shop_router.get("/product/{product_id}", include_in_schema=False)
def product_detail(
    request: Request,
    product_id: int,
    db: Session = Depends(get_db),
):
    """
    Render the detail page for one product.

    An unknown id renders the same page with a not-found message and 404.
    """
    product = catalog.get_product_by_id(db, product_id)
    status_code = 200 if product is not None else 404

    return templates.TemplateResponse(
        request,
        "product_detail.html",
        {"product": product, "product_id": product_id},
        status_code=status_code,
    )

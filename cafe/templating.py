"""Shared Jinja2 template renderer for the HTML routes."""

from fastapi.templating import Jinja2Templates

from .config import TEMPLATES_DIR

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def format_price(value: float) -> str:
    """Jinja filter: 3.5 -> '$3.50'."""
    return f"${value:,.2f}"


templates.env.filters["price"] = format_price

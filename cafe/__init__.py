"""Minimal café ordering web app: FastAPI routes, Jinja2 pages, SQLAlchemy storage."""

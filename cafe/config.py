"""
Configuration Module for the Café App
=====================================

All environment variables, defaults and constants used by the café app live
here. Values are read once at import time; `main.py` calls `load_dotenv()`
before anything imports this module, so a local `.env` file works too.

Configuration Categories:
-------------------------
- **Database**: SQLAlchemy URL for the product/user/session tables.

- **Server**: Bind address and port used by `run_server.py`.

- **Cookies**: Names of the cookies the app reads and writes.

- **CORS Settings**: Cross-Origin Resource Sharing configuration. Defaults
  allow all origins for development.

Environment Variables:
----------------------
- DATABASE_URL: SQLAlchemy database URL (default: "sqlite:///./cafe.db")
- HOST: Bind address (default: "0.0.0.0")
- PORT: Bind port (default: 3000)
- LOG_LEVEL: Read by logging_config.setup_logging (default: "INFO")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")

Usage:
------
    from cafe.config import SESSION_COOKIE_NAME, DATABASE_URL
"""

import os
from typing import List


# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./cafe.db")


# =============================================================================
# Server Configuration
# =============================================================================

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))


# =============================================================================
# Cookie Configuration
# =============================================================================
# The session cookie carries the token issued at login. It has no expiry and
# is never rotated or revoked.

SESSION_COOKIE_NAME = "cafejs_session"

# Echoed by GET /username; nothing in the app sets it
USERNAME_COOKIE_NAME = "cafejs_username"

# Number of random bytes in a session token (base64-encoded in the cookie)
SESSION_TOKEN_BYTES = 16


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins, e.g. "https://cafe.example.com"

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]


# =============================================================================
# Templates
# =============================================================================

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

#!/usr/bin/env python3
"""
Startup script for the café app.

Usage:
    # Run on the configured HOST/PORT (default 0.0.0.0:3000)
    python run_server.py

    # Run with custom port
    python run_server.py --port 8001

    # Run with reload for development
    python run_server.py --reload

    # Seed the menu and demo user first
    python run_server.py --seed
"""

import argparse

from dotenv import load_dotenv


def main():
    load_dotenv()

    # Read after load_dotenv so .env values apply
    from cafe.config import HOST, PORT

    parser = argparse.ArgumentParser(
        description="Run the café web app"
    )
    parser.add_argument(
        "--host",
        default=HOST,
        help=f"Host to bind to (default: {HOST})",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=PORT,
        help=f"Port to run on (default: {PORT})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Seed the menu and demo user before starting",
    )

    args = parser.parse_args()

    if args.seed:
        from cafe.seed_menu import seed_menu
        seed_menu()

    import uvicorn

    print("App is listening on %s:%d" % (args.host, args.port))
    uvicorn.run(
        "cafe.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()

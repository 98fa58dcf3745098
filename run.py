#!/usr/bin/env python3
"""
Entry point script to run the Git resolver service.

This script should be run from the project root directory:
    python run.py

Environment variables:
    APP_HOST: Host to bind to (default: 127.0.0.1)
    APP_PORT: Port to bind to (default: 8000)
    APP_DEBUG: Enable debug mode (default: false)
"""
import asyncio
import os

from hypercorn.asyncio import serve
from hypercorn.config import Config

if __name__ == "__main__":
    from application.app import app
    from common.config.config import APP_HOST, APP_PORT

    debug = os.getenv("APP_DEBUG", "false").lower() == "true"

    config = Config()
    config.bind = [f"{APP_HOST}:{APP_PORT}"]
    config.graceful_timeout = 30         # Graceful shutdown timeout

    if debug:
        config.loglevel = "DEBUG"
        config.accesslog = "-"  # Log to stdout
        config.errorlog = "-"

    print(f"Starting Git resolver on {APP_HOST}:{APP_PORT}")
    print(f"Debug mode: {debug}")

    # Run with Hypercorn
    asyncio.run(serve(app, config))

"""
Configuration module.

Values are read once from the environment (and an optional .env file) and
exposed as module-level constants.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# GitHub API
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_REQUEST_TIMEOUT = float(os.getenv("GITHUB_REQUEST_TIMEOUT", "150"))
GITHUB_CONNECT_TIMEOUT = float(os.getenv("GITHUB_CONNECT_TIMEOUT", "60"))

# Shared application credentials, used when the caller supplies no token.
# Anonymous requests run against a much lower rate quota.
GITHUB_CLIENT_ID = os.getenv("GITHUB_CLIENT_ID")
GITHUB_CLIENT_SECRET = os.getenv("GITHUB_CLIENT_SECRET")

# Commit resolution caches
RESOLUTION_CACHE_MAX_SIZE = int(os.getenv("RESOLUTION_CACHE_MAX_SIZE", "500"))
RESOLUTION_CACHE_TTL_SECONDS = float(os.getenv("RESOLUTION_CACHE_TTL_SECONDS", "5"))
VALIDATOR_CACHE_MAX_SIZE = int(os.getenv("VALIDATOR_CACHE_MAX_SIZE", "50000"))

# HTTP server
APP_HOST = os.getenv("APP_HOST", "127.0.0.1")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_LOG_FILE = os.getenv("APP_LOG_FILE", "app-log.log")

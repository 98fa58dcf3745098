"""
Application routes package.

Contains all API endpoint blueprints.
"""

from application.routes.git_routes import git_bp

__all__ = ["git_bp"]

"""
API Routes Module

Exposes all route modules for registration in main app.
"""
from . import routes_mcp

__all__ = ["routes_mcp"]

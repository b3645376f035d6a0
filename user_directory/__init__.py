"""
Top‑level package for the User Directory service.

The package provides no public exports; the FastAPI application and
everything it is built from live in submodules under ``app``.
"""

__all__ = []

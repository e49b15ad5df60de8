"""
Top‑level package for the Projects API.

This file makes ``projects_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``projects_api.app.main``.  The HTTP client for the service lives in
``projects_api.client``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []

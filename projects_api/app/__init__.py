"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database access),
``schemas`` (request and response models), ``services`` (data access)
and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401

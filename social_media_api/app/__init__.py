"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (settings, logging, database), ``dao`` (SQL
access), ``schemas`` (pydantic records), ``services`` (business rules)
and ``api`` (HTTP routers).
"""

from .main import app  # noqa: F401

"""
Application package initializer.

This package contains the FastAPI entrypoint for the event creation
form and its submodules: ``core`` (settings, logging, sessions),
``schemas`` (draft and wire models), ``services`` (validation and the
form controller) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401

"""
Top-level package for the event creation form service.

This file makes ``event_form`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``event_form.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

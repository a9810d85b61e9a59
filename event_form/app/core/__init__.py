"""Core infrastructure: settings, logging configuration and sessions."""

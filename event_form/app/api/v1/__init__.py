"""
Version 1 of the API.

Breaking changes to the form endpoints should be introduced in a new
version subpackage to preserve backwards compatibility.
"""

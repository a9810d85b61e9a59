"""
Pydantic schema definitions for the form and for the outbound payload.

The draft itself is a plain mutable object owned by the form
controller; the models here describe what crosses a boundary, either
the HTTP surface of this service or the remote events API.
"""

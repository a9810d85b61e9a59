"""Business logic: field validation, the form controller and its registry."""

"""
Application package for the club site API.

The code is split by concern: ``core`` holds configuration, logging,
security, error handling and the in-memory store; ``schemas`` the
pydantic payloads per entity; ``services`` the few operations beyond
plain CRUD; and ``api`` the versioned HTTP routes.
"""

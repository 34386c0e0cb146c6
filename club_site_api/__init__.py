"""
Top-level package for the football club site API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``club_site_api.app.main:app``.
"""

__all__ = []

"""Print a long-lived bearer token for the administrator account.

Useful for scripts and integrations that call the admin routes.  The
token is signed with ``SECRET_KEY``, so export the same value the
server runs with before calling this script.

Usage:
    SECRET_KEY=... python create_token.py [username] [days]
"""
import sys

from club_site_api.app.core.config import settings
from club_site_api.app.core.security import create_access_token

username = sys.argv[1] if len(sys.argv) > 1 else settings.admin_username
days = int(sys.argv[2]) if len(sys.argv) > 2 else 365
token = create_access_token({"sub": username}, secret_key=settings.secret_key, expires_in=days * 24 * 60 * 60)
print(token)

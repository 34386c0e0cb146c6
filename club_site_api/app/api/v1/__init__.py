"""
Version 1 of the club site API.

Breaking changes to routes or payloads belong in a new version
subpackage (e.g. ``v2``) so existing clients keep working.
"""

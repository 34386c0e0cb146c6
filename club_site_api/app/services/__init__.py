"""
Service layer.

Plain create/read/update/delete goes straight from the routes to the
repositories.  Services hold the operations that need more than that:
account handling, the fixture/result views of the match list, the
contact inbox and the demo content loader.
"""

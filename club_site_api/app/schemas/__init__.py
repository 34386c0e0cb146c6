"""
Pydantic schema definitions for API payloads.

Each entity (players, matches, news, ...) defines its own module with a
create payload, a partial update payload and the stored record shape.
"""

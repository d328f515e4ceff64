"""
Pydantic schema definitions for API payloads.

Schemas double as the stored record types: the stores keep pydantic
instances and hand out copies.  Response-only shapes (such as an order
enriched with its user) are kept separate from the stored types.
"""

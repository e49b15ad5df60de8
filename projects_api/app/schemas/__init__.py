"""
Pydantic schema definitions for API payloads.

Schemas double as the shape of the documents stored in MongoDB, so a
record read back from the collection is validated with the same model
the API returns.
"""

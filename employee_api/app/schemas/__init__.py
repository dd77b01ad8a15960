"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain model to decouple the JSON
representation (camelCase keys) from persistence.
"""

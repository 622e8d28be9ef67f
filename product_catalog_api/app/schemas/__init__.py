"""
Pydantic schema definitions for API payloads.

Schemas describe the request and response bodies in the generated
OpenAPI document.  They are kept separate from the stored records,
which are plain JSON objects.
"""

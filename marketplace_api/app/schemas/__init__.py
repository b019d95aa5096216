"""
Pydantic schema definitions for API payloads.

Every route answers with the same response envelope, described by
``ApiResponse``.  Request bodies are accepted as free-form JSON and
are therefore not modelled here.
"""

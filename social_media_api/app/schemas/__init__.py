"""
Pydantic schema definitions for API payloads.

Each domain (accounts, messages) defines its own Pydantic models for
request and response bodies.  The stored records (``Account`` and
``Message``) double as the objects passed between services and the
database layer.
"""

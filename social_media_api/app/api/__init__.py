"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``.  A
version subpackage exposes a top-level ``router`` which includes all
of its domain-specific endpoints.  ``deps`` builds the services used by
the endpoints and ``errors`` maps service exceptions to responses.
"""

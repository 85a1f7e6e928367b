"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to the
database only through the DAO it is constructed with, so the storage
can be swapped (or faked in tests) without changing API handlers.
"""

"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its repository explicitly, so the API handlers never touch the store
directly.
"""

"""
Core utilities: shared exceptions and cross-cutting concerns used by the
database layer and the API server.
"""

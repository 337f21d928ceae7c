"""
API server package: HTTP/JSON interface over the transaction store.

Routes requests to the lookup handlers, validates parameters, and maps
database outcomes to HTTP status codes.
"""

"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call into services and translate their errors into HTTP responses, so
the storage behind a service can change without touching the routes.
"""

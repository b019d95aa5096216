"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  The current
services are placeholders that accept any input and return empty
results; handlers depend only on their method signatures so a real
implementation can be dropped in without changing the API layer.
"""

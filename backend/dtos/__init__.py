"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple callers from the domain objects.
DTOs prevent leaking domain internals to external callers and allow independent evolution.

Structure:
- request/: DTOs for incoming requests
- response/: DTOs for outgoing responses
"""

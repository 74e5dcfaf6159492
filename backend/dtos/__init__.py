"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking database structure (and the password hash) to external APIs.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
- mappers: projection of ORM entities into response DTOs
"""

"""Signup service package following Clean Architecture.

Layers:
- domain: entities, ports and the add-account use case
- data: adapters (hashing, email checks) and repository implementations
- presentation: controllers, validations, HTTP helpers and FastAPI routers
- core: configuration, DI, and utilities
"""

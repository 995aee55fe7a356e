"""
Feature modules for the Bookshelf backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Supabase table access
- service.py: Business logic implementation
- routes.py: FastAPI route handlers

Modules communicate through interfaces, not concrete implementations.
"""

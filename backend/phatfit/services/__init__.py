# phatfit/services/__init__.py
"""
Service layer.
- credential_store: UserStore, the persistence handle for users and their embedded records
"""
from .credential_store import UserStore

__all__ = ["UserStore"]

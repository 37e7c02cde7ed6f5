# phatfit/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: User account, credentials and the embedded fitness record history
"""
from .user import User

# phatfit/models/user.py
"""
Database model for users.
Represents a user account, its credentials and the fitness records it owns.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Records (and the exercises inside them) are embedded in the user row as a
    JSON array rather than kept in a separate table: they have no identity of
    their own and are only ever read or appended together with their owner.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users (enforced by a unique index)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    email = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login email (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never returned by the API
    name = fields.CharField(max_length=256)  # Display name
    records = fields.JSONField(default=list)  # Ordered list of record dicts, in append order
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

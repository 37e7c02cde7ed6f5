# phatfit/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup, database connection, and migration configuration.
"""
from tortoise import Tortoise

from phatfit.config import settings

MODEL_MODULES = [
    "phatfit.models.user",  # User model (records are embedded in it)
    "aerich.models",        # Required: Let Aerich manage migration tables
]

def build_tortoise_config(db_url: str) -> dict:
    """
    Build the Tortoise ORM configuration dictionary for a connection URL.

    Args:
        db_url: Tortoise connection URL, e.g. ``postgres://user:pw@host:5432/phatfit``
            or ``sqlite://:memory:``
    """
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": list(MODEL_MODULES),
                "default_connection": "default",
            },
        },
    }

# Module-level configuration used by Aerich for database migrations
TORTOISE_ORM = build_tortoise_config(settings.database_url)

async def init_db(db_url: str, generate_schemas: bool = False) -> None:
    """
    Initialize Tortoise ORM database connection.

    Args:
        db_url: Tortoise connection URL
        generate_schemas: Create missing tables (development and tests); leave it
            off when the schema is managed with Aerich migrations
    """
    await Tortoise.init(config=build_tortoise_config(db_url))
    if generate_schemas:
        await Tortoise.generate_schemas(safe=True)

async def close_db() -> None:
    """Close all database connections."""
    await Tortoise.close_connections()

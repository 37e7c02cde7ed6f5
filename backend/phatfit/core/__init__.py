# phatfit/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Startup checks (refuses an unsafe token secret in production)
- db: Database configuration and connection management
- errors: Error taxonomy shared by the store, the auth gate and the routes
- security: Password hashing and bearer token issuing/verification
"""

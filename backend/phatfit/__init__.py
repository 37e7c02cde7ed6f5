"""Phat & Fit API: user accounts, bearer-token auth and per-user fitness records."""

__version__ = "0.1.0"

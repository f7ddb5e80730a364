"""Subpackage aggregating individual auth route modules."""

__all__ = ["signup", "signin", "google_auth"]

"""Subpackage aggregating individual blog route modules."""

__all__ = ["create_blog", "latest_blogs"]

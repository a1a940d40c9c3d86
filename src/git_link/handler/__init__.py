"""Editor-facing link handling."""

from git_link.handler.links import LinkHandler

__all__ = ["LinkHandler"]

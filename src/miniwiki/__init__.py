"""MiniWiki: a minimal Markdown wiki server."""

__version__ = "0.1.0"

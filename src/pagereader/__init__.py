"""Read web pages as Markdown through a fallback chain of retrieval strategies."""

__version__ = "0.1.0"

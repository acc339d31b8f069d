"""Classic algorithms and data structures for contest-style problem solving."""

__version__ = "0.1.0"
"""Output formatters for storydoc."""

from .markdown_formatter import MarkdownFormatter, generate_markdown

__all__ = [
    "MarkdownFormatter",
    "generate_markdown",
]

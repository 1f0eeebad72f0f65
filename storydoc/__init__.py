"""
storydoc - Markdown documentation from component stories files.

Main Components:
- Extractors: meta block location, story export scanning, field extraction
- Formatters: Markdown rendering
- Utils: component discovery and path conventions
- Generator: batch orchestration with per-component error isolation

Usage:
    from storydoc import extract_document, generate_markdown

    data = extract_document(Path("packages/Button/src/index.stories.tsx").read_text())
    markdown = generate_markdown(data, "Button")
"""

__version__ = "0.1.0"

from .schemas import (
    ConfigurationInfo,
    ExportRecord,
    DocumentData,
    ComponentResult,
    GenerationSummary,
)
from .extractors import StoriesExtractor, extract_document
from .formatters import MarkdownFormatter, generate_markdown
from .generator import StoryDocGenerator, generate_component_markdown

__all__ = [
    # Main generator
    "StoryDocGenerator",
    "generate_component_markdown",

    # Extraction
    "StoriesExtractor",
    "extract_document",

    # Formatting
    "MarkdownFormatter",
    "generate_markdown",

    # Schemas
    "ConfigurationInfo",
    "ExportRecord",
    "DocumentData",
    "ComponentResult",
    "GenerationSummary",
]

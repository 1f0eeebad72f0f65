"""Extraction components for storydoc."""

from .balancer import BodyCapture, BraceBalancer, DelimiterBalancer
from .span_extractor import extract_delimited, strip_quotes
from .field_extractor import FieldExtractor
from .meta_locator import MetaLocator
from .export_scanner import ExportScanner
from .engine import StoriesExtractor, extract_document

__all__ = [
    "BodyCapture",
    "BraceBalancer",
    "DelimiterBalancer",
    "extract_delimited",
    "strip_quotes",
    "FieldExtractor",
    "MetaLocator",
    "ExportScanner",
    "StoriesExtractor",
    "extract_document",
]

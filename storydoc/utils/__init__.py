"""Utility functions for storydoc."""

from .file_scanner import ComponentScanner, list_components

__all__ = ["ComponentScanner", "list_components"]

"""Output formatters for jsonschemadoc."""

from .document_formatter import DocumentFormatter, render_document

__all__ = [
    "DocumentFormatter",
    "render_document",
]

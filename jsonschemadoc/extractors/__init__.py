"""Extraction components for jsonschemadoc."""

from .extensions import DecodeResult, decode_extension_fields
from .property_extractor import PropertyExtractor, extract_properties

__all__ = [
    "DecodeResult",
    "decode_extension_fields",
    "PropertyExtractor",
    "extract_properties",
]

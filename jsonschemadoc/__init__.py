"""
jsonschemadoc - Annotated JSON documents from JSON Schemas.

Turns the properties declared by a JSON Schema into a JSON-like document
with `//` comments, suitable for generated documentation and default
configuration templates.

Main Components:
- Extractors: Walk the schema tree and collect visible properties
- Grouping: Partition properties by group tag and order them deterministically
- Formatters: Render the annotated document
- Generator: Orchestrates the pipeline

Usage:
    from jsonschemadoc import generate

    schema = {
        "type": "object",
        "properties": {
            "port": {"description": "Listen port", "default": 8080, "group": "Server"}
        }
    }
    print(generate(schema))

Property extension fields:
- "hide": true    excludes the property
- "group": "Name" renders the property under a "Name" banner
"""

from .schemas import (
    JSONSchema,
    ExtensionFields,
    PropertyDescriptor,
    PropertyGroup,
)

from .config import GeneratorSettings
from .errors import (
    SchemaDocError,
    SchemaDecodeError,
    ExtensionDecodeError,
    DocumentEncodingError,
)
from .loader import load_schema, load_schema_file
from .generator import SchemaDocGenerator, generate

__all__ = [
    # Main generator
    "generate",
    "SchemaDocGenerator",
    "GeneratorSettings",

    # Loading
    "load_schema",
    "load_schema_file",

    # Schemas
    "JSONSchema",
    "ExtensionFields",
    "PropertyDescriptor",
    "PropertyGroup",

    # Errors
    "SchemaDocError",
    "SchemaDecodeError",
    "ExtensionDecodeError",
    "DocumentEncodingError",
]

__version__ = "0.1.0"

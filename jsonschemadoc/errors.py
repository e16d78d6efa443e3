"""
Exceptions raised while generating a schema document.

Every failure surfaces as a subclass of SchemaDocError so callers can catch
generation failures with a single except clause.
"""


class SchemaDocError(Exception):
    """Generation failed; no document was produced."""


class SchemaDecodeError(SchemaDocError):
    """A schema, or a core property field (default, const, examples, description), could not be decoded."""


class ExtensionDecodeError(SchemaDocError):
    """The hide/group extension fields of a property are malformed (strict mode only)."""


class DocumentEncodingError(SchemaDocError):
    """A collected value could not be encoded as JSON."""

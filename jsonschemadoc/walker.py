"""
Depth-first traversal of a schema tree.

A visitor's `visit` is called for every node reached. Returning a visitor
(usually itself) descends into that node's sub-schemas with it; returning
None skips them.
"""

from typing import Callable, Iterable, Optional, Tuple

from jsonschemadoc.schemas import JSONSchema

Path = Tuple[str, ...]


class SchemaVisitor:
    """Base class for schema tree visitors."""

    def visit(self, schema: JSONSchema, path: Path) -> Optional["SchemaVisitor"]:
        raise NotImplementedError


class CallbackVisitor(SchemaVisitor):
    """Adapts a plain callable to the visitor interface."""

    def __init__(self, callback: Callable[[JSONSchema, Path], Optional[SchemaVisitor]]):
        self.callback = callback

    def visit(self, schema: JSONSchema, path: Path) -> Optional[SchemaVisitor]:
        return self.callback(schema, path)


def walk(visitor: SchemaVisitor, schema: JSONSchema, keywords: Iterable[str], path: Path = ()):
    """
    Walk `schema` depth-first, descending through the given keywords.

    Args:
        visitor: Visitor called for each node
        schema: Node to start at
        keywords: JSON Schema keywords whose sub-schemas are visited
        path: Reference tokens leading to `schema`
    """
    keywords = tuple(keywords)
    child = visitor.visit(schema, path)
    if child is None:
        return
    for relative, sub in schema.iter_subschemas(keywords):
        walk(child, sub, keywords, path + relative)


def json_pointer(path: Path) -> str:
    """Format reference tokens as a JSON Pointer (RFC 6901)."""
    if not path:
        return "#"
    escaped = (token.replace("~", "~0").replace("/", "~1") for token in path)
    return "#/" + "/".join(escaped)

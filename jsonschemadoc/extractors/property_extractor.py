"""
Property extraction from a schema tree.

Walks the root schema and its composed sub-schemas (allOf, anyOf, oneOf, ...)
and collects one PropertyDescriptor per visible declared property. Properties
with the same name in different sub-schemas are all kept.
"""

from typing import List, Optional
import logging

from jsonschemadoc.config import GeneratorSettings
from jsonschemadoc.errors import ExtensionDecodeError, SchemaDecodeError
from jsonschemadoc.extractors.extensions import decode_extension_fields
from jsonschemadoc.schemas import JSONSchema, PropertyDescriptor
from jsonschemadoc.walker import Path, SchemaVisitor, json_pointer, walk

logger = logging.getLogger(__name__)


class PropertyExtractor(SchemaVisitor):
    """
    Collect visible property descriptors from a schema tree.

    Hidden properties (`"hide": true`) are skipped entirely. A malformed
    extension field falls back to its default ("visible" or "ungrouped") unless
    `settings.strict_extensions` is set; malformed core fields always abort.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None):
        self.settings = settings or GeneratorSettings()
        self.descriptors: List[PropertyDescriptor] = []

    def extract(self, schema: JSONSchema) -> List[PropertyDescriptor]:
        """
        Extract descriptors in traversal order.

        Args:
            schema: Root of the schema tree

        Returns:
            List of PropertyDescriptor (empty if no properties are declared)

        Raises:
            SchemaDecodeError: If a property's core fields are malformed
            ExtensionDecodeError: In strict mode, if extension fields are malformed
        """
        self.descriptors = []
        walk(self, schema, self.settings.composition_keywords)
        logger.debug(f"Extracted {len(self.descriptors)} visible properties")
        return list(self.descriptors)

    def visit(self, schema: JSONSchema, path: Path) -> Optional[SchemaVisitor]:
        if schema.kind == "object":
            for name, prop in schema.properties.items():
                descriptor = self._describe(name, prop, path + ("properties", name))
                if descriptor is not None:
                    self.descriptors.append(descriptor)
        return self

    def _describe(self, name: str, prop: JSONSchema, path: Path) -> Optional[PropertyDescriptor]:
        pointer = json_pointer(path)

        extension = decode_extension_fields(prop.raw)
        if not extension.ok:
            if self.settings.strict_extensions:
                raise ExtensionDecodeError(
                    f"Invalid extension fields on property {name!r} at {pointer}: {extension.error}"
                )
            logger.warning(
                f"Ignoring invalid extension fields on property {name!r} at {pointer}: {extension.error}"
            )
        fields = extension.value

        if fields.hide:
            logger.debug(f"Skipping hidden property {pointer}")
            return None

        examples = prop.examples
        if examples is None:
            examples = []
        elif not isinstance(examples, list):
            raise SchemaDecodeError(
                f"Property {name!r} at {pointer}: examples must be an array, "
                f"got {type(examples).__name__}"
            )

        comment = prop.description
        if comment is None:
            comment = ""
        elif not isinstance(comment, str):
            raise SchemaDecodeError(
                f"Property {name!r} at {pointer}: description must be a string, "
                f"got {type(comment).__name__}"
            )

        # Const wins over default and is listed ahead of its siblings
        sorts_first = False
        value = None
        if prop.declares("const"):
            value = prop.const
            sorts_first = True
        elif prop.declares("default"):
            value = prop.default

        return PropertyDescriptor(
            name=name,
            comment=comment,
            value=value,
            examples=list(examples),
            group_name=fields.group,
            sorts_first=sorts_first,
        )


def extract_properties(
    schema: JSONSchema,
    settings: Optional[GeneratorSettings] = None
) -> List[PropertyDescriptor]:
    """
    Convenience function to extract visible property descriptors.

    Args:
        schema: Root of the schema tree
        settings: Optional generator settings

    Returns:
        List of PropertyDescriptor in traversal order
    """
    return PropertyExtractor(settings).extract(schema)

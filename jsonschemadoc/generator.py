"""
Schema document generator - main orchestration logic.

Ties together extraction, grouping and formatting:
schema tree -> property descriptors -> ordered groups -> text.
"""

from typing import Optional
import logging

from jsonschemadoc.config import GeneratorSettings
from jsonschemadoc.extractors import PropertyExtractor
from jsonschemadoc.formatters import DocumentFormatter
from jsonschemadoc.grouping import group_properties, order_groups
from jsonschemadoc.loader import SchemaSource, load_schema

logger = logging.getLogger(__name__)


class SchemaDocGenerator:
    """
    Generate annotated JSON documents from JSON Schemas.

    Holds no state between calls; one instance may be shared freely.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None):
        """
        Initialize the generator.

        Args:
            settings: Generator settings (default: GeneratorSettings())
        """
        self.settings = settings or GeneratorSettings()

    def generate(self, schema: SchemaSource) -> str:
        """
        Generate the document describing the schema's properties.

        Args:
            schema: JSONSchema, JSON object or boolean schema

        Returns:
            Annotated JSON document ("{}" if no visible properties)

        Raises:
            SchemaDecodeError: If the schema or a core property field is malformed
            ExtensionDecodeError: In strict mode, if hide/group fields are malformed
            DocumentEncodingError: If a value cannot be encoded as JSON
        """
        tree = load_schema(schema)

        descriptors = PropertyExtractor(self.settings).extract(tree)
        groups = order_groups(group_properties(descriptors))

        logger.info(f"Generating document for {len(descriptors)} properties in {len(groups)} groups")
        return DocumentFormatter(self.settings).format(groups)


def generate(schema: SchemaSource, settings: Optional[GeneratorSettings] = None) -> str:
    """
    Convenience function to generate a schema document.

    Example:
        >>> generate({"type": "object", "properties": {"a": {"default": 1}}})
        '{\\n\\t"a": 1\\n}'
    """
    return SchemaDocGenerator(settings).generate(schema)

"""
Annotated JSON document formatter.

Renders ordered property groups as a JSON-like object with `//` comments:

{
//////////////////////////////////////////////////////////////
// Group name
//////////////////////////////////////////////////////////////

	// Property description
	"name": "value",
	// Other example values:
	// - "example"

	"other": null
}

The unnamed group (if any) comes first and has no banner. Every property but
the last in the document is followed by a comma.
"""

import json
from typing import Any, List, Optional
import logging

from jsonschemadoc.config import GeneratorSettings
from jsonschemadoc.errors import DocumentEncodingError
from jsonschemadoc.schemas import PropertyDescriptor, PropertyGroup

logger = logging.getLogger(__name__)


class DocumentFormatter:
    """Render PropertyGroups as an annotated JSON document."""

    COMMENT_MARKER = "//"
    EXAMPLES_HEADER = "Other example values:"
    PROPERTY_INDENT = "\t"

    # HTML-significant characters and JavaScript line terminators
    ESCAPED_CHARS = {
        "&": "\\u0026",
        "<": "\\u003c",
        ">": "\\u003e",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }

    def __init__(self, settings: Optional[GeneratorSettings] = None):
        self.settings = settings or GeneratorSettings()

    def format(self, groups: List[PropertyGroup]) -> str:
        """
        Render groups in the given order.

        Args:
            groups: Ordered groups (see grouping.order_groups)

        Returns:
            The document text; "{}" when there are no properties

        Raises:
            DocumentEncodingError: If a name, value or example is not JSON-encodable
        """
        total = sum(len(group.properties) for group in groups)
        emitted = 0
        parts = ["{"]

        for group_index, group in enumerate(groups):
            if group_index > 0:
                parts.append("\n\n")
            elif group.name:
                parts.append("\n")

            if group.name:
                parts.append(self._format_banner(group.name))

            for prop_index, prop in enumerate(group.properties):
                emitted += 1
                parts.append("\n" if prop_index == 0 else "\n\n")
                parts.append(self._format_property(prop, is_last=emitted == total))

        if total > 0:
            parts.append("\n")
        parts.append("}")

        logger.debug(f"Rendered {total} properties in {len(groups)} groups")
        return "".join(parts)

    def _format_banner(self, name: str) -> str:
        rule = self.COMMENT_MARKER + "/" * self.settings.banner_width
        return f"{rule}\n{self.format_comment(name, indent='')}\n{rule}\n"

    def _format_property(self, prop: PropertyDescriptor, is_last: bool) -> str:
        lines = []
        if prop.comment:
            lines.append(self.format_comment(prop.comment))

        entry = (
            self.PROPERTY_INDENT
            + self._encode_value(prop.name, prop.name)
            + ": "
            + self._encode_value(prop.value, prop.name)
        )
        if not is_last:
            entry += ","
        lines.append(entry)

        if prop.examples:
            lines.append(self.format_comment(self.EXAMPLES_HEADER))
            for example in prop.examples:
                lines.append(self.format_comment("- " + self._encode_example(example, prop.name)))

        return "\n".join(lines)

    def format_comment(self, text: str, indent: Optional[str] = None) -> str:
        """
        Format text as `//` comment lines.

        The text is trimmed and split on newlines; empty lines keep the bare
        marker without a trailing space.

        Args:
            text: Comment text
            indent: Prefix for each line (default: property indent)

        Returns:
            Comment lines joined by newlines (no trailing newline)
        """
        if indent is None:
            indent = self.PROPERTY_INDENT
        lines = text.strip().split("\n")
        return "\n".join(
            f"{indent}{self.COMMENT_MARKER} {line}" if line else f"{indent}{self.COMMENT_MARKER}"
            for line in lines
        )

    def _encode_value(self, value: Any, prop_name: str) -> str:
        indent = self.settings.value_indent
        encoded = self._dumps(value, prop_name, indent=indent)
        # Continuation lines sit one level inside the property entry
        return encoded.replace("\n", "\n" + self.PROPERTY_INDENT)

    def _encode_example(self, example: Any, prop_name: str) -> str:
        encoded = self._dumps(example, prop_name, separators=(",", ":"))
        if len(encoded) > self.settings.long_example_threshold:
            indent = self.settings.example_indent
            encoded = self._dumps(example, prop_name, indent=indent)
            encoded = encoded.replace("\n", "\n" + indent)
        return encoded

    def _dumps(self, value: Any, prop_name: str, **kwargs) -> str:
        try:
            encoded = json.dumps(value, ensure_ascii=False, sort_keys=True, allow_nan=False, **kwargs)
        except (TypeError, ValueError) as e:
            raise DocumentEncodingError(f"Cannot encode value of property {prop_name!r}: {e}") from e
        # These characters only ever occur inside string literals here
        for char, escaped in self.ESCAPED_CHARS.items():
            encoded = encoded.replace(char, escaped)
        return encoded


def render_document(
    groups: List[PropertyGroup],
    settings: Optional[GeneratorSettings] = None
) -> str:
    """
    Convenience function to render ordered groups.

    Args:
        groups: Ordered property groups
        settings: Optional generator settings

    Returns:
        Annotated JSON document text
    """
    return DocumentFormatter(settings).format(groups)

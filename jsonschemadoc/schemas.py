"""
Pydantic schemas for jsonschemadoc.

This module defines the schema tree read by the generator and the records
produced while turning it into a document.

Architecture:
- JSONSchema: Decoded JSON Schema node (keeps the raw mapping it came from)
- ExtensionFields: Implementation-defined `hide`/`group` attributes of a property
- PropertyDescriptor: One visible property to render
- PropertyGroup: Descriptors sharing a documentation group tag
"""

from typing import Any, Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, PrivateAttr, ValidationInfo, field_validator, model_validator


SchemaKind = Literal["object", "combinator", "leaf"]

# JSON Schema keyword -> model attribute, for keywords holding sub-schemas
SUBSCHEMA_KEYWORDS: Dict[str, str] = {
    "allOf": "all_of",
    "anyOf": "any_of",
    "oneOf": "one_of",
    "not": "not_",
    "if": "if_",
    "then": "then",
    "else": "else_",
    "items": "items",
    "definitions": "definitions",
    "$defs": "defs",
}

COMBINATOR_KEYWORDS = ("allOf", "anyOf", "oneOf", "not", "if", "then", "else")


# ============================================================================
# SCHEMA TREE
# ============================================================================

class JSONSchema(BaseModel):
    """
    A decoded JSON Schema node.

    Only the keywords the document generator reads are typed; everything else
    is kept as extra attributes and in `raw`. Boolean schemas are accepted
    (`true` decodes to an empty schema, `false` to `{"not": {}}`).
    """
    type: Optional[Union[str, List[str]]] = Field(None, description="Primitive type(s)")
    title: Optional[str] = Field(None, description="Short title")
    description: Optional[str] = Field(None, description="Free-text description")
    default: Any = Field(None, description="Default value")
    const: Any = Field(None, description="Constant value")
    examples: Optional[List[Any]] = Field(None, description="Example values")

    properties: Optional[Dict[str, "JSONSchema"]] = Field(None, description="Declared properties")
    items: Optional[Union["JSONSchema", List["JSONSchema"]]] = None

    all_of: Optional[List["JSONSchema"]] = Field(None, alias="allOf")
    any_of: Optional[List["JSONSchema"]] = Field(None, alias="anyOf")
    one_of: Optional[List["JSONSchema"]] = Field(None, alias="oneOf")
    not_: Optional["JSONSchema"] = Field(None, alias="not")
    if_: Optional["JSONSchema"] = Field(None, alias="if")
    then: Optional["JSONSchema"] = None
    else_: Optional["JSONSchema"] = Field(None, alias="else")

    definitions: Optional[Dict[str, "JSONSchema"]] = None
    defs: Optional[Dict[str, "JSONSchema"]] = Field(None, alias="$defs")

    _raw: Dict[str, Any] = PrivateAttr(default_factory=dict)

    class Config:
        populate_by_name = True
        extra = "allow"

    @model_validator(mode="wrap")
    @classmethod
    def _decode_node(cls, data: Any, handler):
        if isinstance(data, bool):
            data = {} if data else {"not": {}}
        schema = handler(data)
        if isinstance(data, Mapping):
            schema._raw = dict(data)
        return schema

    @property
    def raw(self) -> Dict[str, Any]:
        """The mapping this node was decoded from."""
        return self._raw

    def declares(self, field_name: str) -> bool:
        """Whether a keyword was present in the source, even with a null value."""
        return field_name in self.model_fields_set

    @property
    def kind(self) -> SchemaKind:
        if self.properties is not None:
            return "object"
        for keyword in COMBINATOR_KEYWORDS:
            if getattr(self, SUBSCHEMA_KEYWORDS[keyword]) is not None:
                return "combinator"
        return "leaf"

    def iter_subschemas(self, keywords) -> Iterator[Tuple[Tuple[str, ...], "JSONSchema"]]:
        """
        Yield (relative path, sub-schema) for every sub-schema under `keywords`.

        Args:
            keywords: JSON Schema keywords to descend into, in order

        Yields:
            Tuples of the reference tokens leading to the sub-schema and the sub-schema
        """
        for keyword in keywords:
            value = getattr(self, SUBSCHEMA_KEYWORDS[keyword])
            if value is None:
                continue
            if isinstance(value, list):
                for index, sub in enumerate(value):
                    yield (keyword, str(index)), sub
            elif isinstance(value, dict):
                for name, sub in value.items():
                    yield (keyword, name), sub
            else:
                yield (keyword,), value


JSONSchema.model_rebuild()


# ============================================================================
# EXTRACTION SCHEMAS
# ============================================================================

class ExtensionFields(BaseModel):
    """Implementation-defined property attributes controlling documentation output."""
    hide: bool = Field(False, description="Exclude the property from the document")
    group: str = Field("", description="Documentation group tag; empty means ungrouped")

    class Config:
        strict = True
        extra = "ignore"

    @field_validator("hide", "group", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class PropertyDescriptor(BaseModel):
    """
    One visible property to render.

    Names are unique within their source schema object only; descriptors
    collected from different sub-schemas may share a name.
    """
    name: str = Field(description="Property key")
    comment: str = Field("", description="Description text, possibly multi-line")
    value: Any = Field(None, description="Const value if declared, else default value")
    examples: List[Any] = Field(default_factory=list, description="Other example values")
    group_name: str = Field("", description="Documentation group; empty means ungrouped")
    sorts_first: bool = Field(False, description="True when the value came from a declared const")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "maxConnections",
                "comment": "Maximum number of open connections.",
                "value": 10,
                "examples": [1, 100],
                "group_name": "Networking",
                "sorts_first": False
            }
        }


class PropertyGroup(BaseModel):
    """Descriptors sharing a group name; the empty name is the ungrouped bucket."""
    name: str = Field("", description="Group name")
    properties: List[PropertyDescriptor] = Field(default_factory=list)

"""
Loading schema trees from JSON values and files.
"""

import json
from pathlib import Path
from typing import Any, Union
import logging

from pydantic import ValidationError

from jsonschemadoc.errors import SchemaDecodeError
from jsonschemadoc.schemas import JSONSchema

logger = logging.getLogger(__name__)

SchemaSource = Union[JSONSchema, dict, bool]


def load_schema(source: SchemaSource) -> JSONSchema:
    """
    Decode a schema tree.

    Args:
        source: An already decoded JSONSchema, a JSON object, or a boolean schema

    Returns:
        JSONSchema

    Raises:
        SchemaDecodeError: If the value cannot be decoded into a schema tree
    """
    if isinstance(source, JSONSchema):
        return source

    try:
        return JSONSchema.model_validate(source)
    except ValidationError as e:
        raise SchemaDecodeError(f"Invalid schema: {e}") from e


def load_schema_file(path: Path) -> JSONSchema:
    """
    Read and decode a JSON schema file.

    Raises:
        SchemaDecodeError: If the file is not valid JSON or not a valid schema
    """
    path = Path(path)
    logger.info(f"Loading schema from {path}")

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SchemaDecodeError(f"Invalid JSON in {path}: {e}") from e

    return load_schema(data)

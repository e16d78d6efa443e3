"""
Best-effort decoding of the `hide`/`group` extension fields of a property.

Decoding never raises: the result carries the decoded fields together with a
description of anything that was wrong. Each field is decoded on its own, so
a valid `hide` survives a malformed `group` and vice versa. A null field
decodes to its default.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from jsonschemadoc.schemas import ExtensionFields


@dataclass
class DecodeResult:
    """Tagged result of an extension decode."""
    value: ExtensionFields = field(default_factory=ExtensionFields)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_extension_fields(raw: Any) -> DecodeResult:
    """
    Decode extension fields from a property's raw mapping.

    Args:
        raw: The raw JSON value the property schema was decoded from

    Returns:
        DecodeResult with every field that decoded (defaults for the rest),
        plus an error message naming the malformed fields, if any
    """
    if not isinstance(raw, Mapping):
        return DecodeResult(error=f"expected an object, got {type(raw).__name__}")

    decoded = {}
    problems = []
    for name in ExtensionFields.model_fields:
        if name not in raw:
            continue
        try:
            decoded[name] = getattr(ExtensionFields.model_validate({name: raw[name]}), name)
        except ValidationError as e:
            problems.extend(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )

    return DecodeResult(
        value=ExtensionFields.model_validate(decoded),
        error="; ".join(problems) if problems else None,
    )

"""
Generator settings.

Settings have defaults matching the documented output format and can be
overridden programmatically or through JSONSCHEMADOC_* environment variables
(a .env file is honored).
"""

import os
import logging
from typing import List

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field, field_validator

from jsonschemadoc.schemas import SUBSCHEMA_KEYWORDS

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSONSCHEMADOC_"

DEFAULT_COMPOSITION_KEYWORDS = ["allOf", "anyOf", "oneOf", "if", "then", "else"]


class GeneratorSettings(BaseModel):
    """Options controlling extraction and rendering."""
    long_example_threshold: int = Field(
        30,
        ge=0,
        description="Examples whose compact JSON is longer than this are pretty-printed"
    )
    example_indent: str = Field("  ", description="Indentation for pretty-printed examples")
    value_indent: str = Field("\t", description="Indentation for nested property values")
    banner_width: int = Field(60, ge=0, description="Number of '/' after the comment marker in group rules")
    strict_extensions: bool = Field(
        False,
        description="Abort generation on malformed hide/group fields instead of ignoring them"
    )
    composition_keywords: List[str] = Field(
        default_factory=lambda: list(DEFAULT_COMPOSITION_KEYWORDS),
        description="Keywords whose sub-schemas contribute properties"
    )

    @field_validator("composition_keywords")
    @classmethod
    def _check_keywords(cls, keywords: List[str]) -> List[str]:
        unknown = [k for k in keywords if k not in SUBSCHEMA_KEYWORDS]
        if unknown:
            raise ValueError(
                f"Unsupported composition keywords: {', '.join(unknown)} "
                f"(supported: {', '.join(SUBSCHEMA_KEYWORDS)})"
            )
        return keywords

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "GeneratorSettings":
        """
        Build settings from environment variables.

        Each field maps to PREFIX + FIELD_NAME in upper case, e.g.
        JSONSCHEMADOC_LONG_EXAMPLE_THRESHOLD. Composition keywords are
        comma-separated. Unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        load_dotenv(find_dotenv(usecwd=True))

        values = {}
        for field_name in cls.model_fields:
            env_value = os.getenv(f"{prefix}{field_name.upper()}")
            if env_value is None:
                continue
            if field_name == "composition_keywords":
                values[field_name] = [k.strip() for k in env_value.split(",") if k.strip()]
            else:
                values[field_name] = env_value

        if values:
            logger.debug(f"Settings overridden from environment: {', '.join(sorted(values))}")

        return cls.model_validate(values)

"""Tests for jsonschemadoc.config."""

import os

import pytest
from pydantic import ValidationError

from jsonschemadoc import GeneratorSettings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in GeneratorSettings.model_fields:
        monkeypatch.delenv(f"JSONSCHEMADOC_{name.upper()}", raising=False)


def test_defaults():
    settings = GeneratorSettings.from_env()
    assert settings == GeneratorSettings()
    assert settings.long_example_threshold == 30
    assert settings.strict_extensions is False
    assert settings.composition_keywords == ["allOf", "anyOf", "oneOf", "if", "then", "else"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JSONSCHEMADOC_LONG_EXAMPLE_THRESHOLD", "40")
    monkeypatch.setenv("JSONSCHEMADOC_STRICT_EXTENSIONS", "true")
    monkeypatch.setenv("JSONSCHEMADOC_COMPOSITION_KEYWORDS", "allOf, oneOf")

    settings = GeneratorSettings.from_env()
    assert settings.long_example_threshold == 40
    assert settings.strict_extensions is True
    assert settings.composition_keywords == ["allOf", "oneOf"]


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("JSONSCHEMADOC_BANNER_WIDTH=10\n", encoding="utf-8")
    try:
        assert GeneratorSettings.from_env().banner_width == 10
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("JSONSCHEMADOC_BANNER_WIDTH", None)


def test_invalid_value(monkeypatch):
    monkeypatch.setenv("JSONSCHEMADOC_LONG_EXAMPLE_THRESHOLD", "many")
    with pytest.raises(ValidationError):
        GeneratorSettings.from_env()


def test_unknown_composition_keyword():
    with pytest.raises(ValidationError, match="properties"):
        GeneratorSettings(composition_keywords=["allOf", "properties"])

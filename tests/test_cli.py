"""Tests for the jsonschemadoc command line."""

import json

import pytest
from typer.testing import CliRunner

from jsonschemadoc.cli import app

runner = CliRunner()

SCHEMA = {
    "type": "object",
    "properties": {
        "port": {"description": "Listen port", "default": 8080},
        "secret": {"default": "x", "hide": True},
    },
}


@pytest.fixture
def schema_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    return path


def test_generate_to_stdout(schema_file):
    result = runner.invoke(app, ["generate", str(schema_file)])
    assert result.exit_code == 0
    assert result.stdout == '{\n\t// Listen port\n\t"port": 8080\n}\n'


def test_generate_to_file(schema_file, tmp_path):
    output = tmp_path / "out" / "settings.jsonc"
    result = runner.invoke(app, ["generate", str(schema_file), "--output", str(output)])
    assert result.exit_code == 0
    assert output.read_text(encoding="utf-8") == '{\n\t// Listen port\n\t"port": 8080\n}\n'


def test_invalid_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["generate", str(path)])
    assert result.exit_code == 1


def test_strict_flag(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"properties": {"a": {"hide": 1}}}), encoding="utf-8")

    result = runner.invoke(app, ["generate", str(path), "--strict"])
    assert result.exit_code == 1


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "jsonschemadoc" in result.stdout

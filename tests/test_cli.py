from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from resource_catalog.classifiers import registry as registry_module
from resource_catalog.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(registry_module, "winreg", None)


def test_list_own_package_as_json() -> None:
    result = runner.invoke(app, ["list", "-", "--json"])
    assert result.exit_code == 0, result.output
    records = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    by_name = {record["name"]: record for record in records}
    assert by_name["data/file_types.yaml"]["type_label"] == "YAML File"
    assert by_name["data/file_types.yaml"]["size_bytes"] > 0


def test_list_own_package_table() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "file_types.yaml" in result.output


def test_info_and_hash() -> None:
    result = runner.invoke(app, ["info", "-", "data/file_types.yaml", "--hash"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert json.loads(lines[0])["name"] == "data/file_types.yaml"
    assert lines[1].startswith("sha1: ")


def test_info_missing_resource() -> None:
    result = runner.invoke(app, ["info", "-", "doesn't exist"])
    assert result.exit_code == 1


def test_summarize() -> None:
    result = runner.invoke(app, ["summarize", "-"])
    assert result.exit_code == 0, result.output
    summary = json.loads(result.output)
    assert summary["total_entries"] >= 1


def test_extract(tmp_path: Path) -> None:
    (tmp_path / "data").mkdir()
    result = runner.invoke(app, ["extract", "-", "data/file_types.yaml", "--out", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "data" / "file_types.yaml").exists()


def test_extract_missing_resource_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["extract", "-", "nope.bin", "--out", str(tmp_path)])
    assert result.exit_code == 1
    assert list(tmp_path.iterdir()) == []


def test_extract_requires_existing_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["extract", "-", "--all", "--out", str(tmp_path / "missing")])
    assert result.exit_code != 0


def test_unloadable_artifact(tmp_path: Path) -> None:
    result = runner.invoke(app, ["list", str(tmp_path / "missing.dll")])
    assert result.exit_code == 1


def test_config_selects_classifier(tmp_path: Path) -> None:
    config = tmp_path / "rescat.yml"
    types = tmp_path / "types.yml"
    types.write_text("extensions:\n  .yaml: yamlfile\ntypes:\n  yamlfile: YAML Document\n")
    config.write_text(f"classifier: static\nfile_types_path: {types}\nlog_level: warning\n")
    result = runner.invoke(app, ["--config", str(config), "info", "-", "data/file_types.yaml"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output.splitlines()[0])["type_label"] == "YAML Document"

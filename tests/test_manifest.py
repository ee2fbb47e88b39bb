# tests/test_manifest.py
"""
Unit tests for script extension detection in ``svue.manifest``.
"""

import json
from pathlib import Path

import pytest

from svue.exceptions import ManifestReadError
from svue.manifest import detect_script_extension, read_manifest


def _manifest(tmp_path: Path, data) -> Path:
    path = tmp_path / "package.json"
    path.write_text(json.dumps(data))
    return path


@pytest.mark.parametrize("section", ["dependencies", "devDependencies"])
def test_typescript_dependency_selects_ts(tmp_path: Path, section: str) -> None:
    path = _manifest(tmp_path, {"name": "app", section: {"typescript": "^5.4.0", "vue": "^3.4.0"}})
    assert detect_script_extension(path) == "ts"


def test_plain_project_selects_js(tmp_path: Path) -> None:
    path = _manifest(tmp_path, {"name": "app", "dependencies": {"vue": "^3.4.0"}})
    assert detect_script_extension(path) == "js"


def test_missing_manifest_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    assert detect_script_extension(tmp_path / "package.json") == "js"
    assert "No manifest found" in caplog.text


@pytest.mark.parametrize("text", ["{ not json", "[1, 2, 3]"], ids = ["invalid", "not-an-object"])
def test_broken_manifest_falls_back(tmp_path: Path, text: str, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "package.json"
    path.write_text(text)
    assert detect_script_extension(path) == "js"
    assert caplog.records and caplog.records[0].levelname == "WARNING"


def test_read_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestReadError):
        read_manifest(tmp_path / "package.json")

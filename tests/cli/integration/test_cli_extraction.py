"""CLI extraction integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import requests
import crd_schema_extractor.cli as cli_module
from crd_schema_extractor.cli import main

LEGACY_FOO_CRD = """\
spec:
  version: v2
  names:
    kind: Foo
  validation:
    openAPIV3Schema:
      a: 1
"""

MULTI_VERSION_CRDS = """\
spec:
  group: stable.example.com
  names:
    kind: CronTab
  versions:
    - name: v1
      schema:
        openAPIV3Schema:
          type: object
    - name: v1beta1
      schema:
        openAPIV3Schema:
          type: object
          deprecated: true
---
this: [is, not, closed
---
spec:
  names:
    kind: Widget
  versions:
    - name: v1
      schema:
        openAPIV3Schema: {}
    - name: v2
"""


class _OfflineSession:
    def get(self, url: str, **kwargs) -> requests.Response:
        raise requests.ConnectionError(f"cannot reach {url}")


@pytest.fixture(autouse=True)
def _isolated_run(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FILENAME_FORMAT", raising=False)
    monkeypatch.delenv("OUTPUT_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(cli_module, "build_http_session", _OfflineSession)


def test_legacy_crd_written_to_working_directory(tmp_path: Path, capsys) -> None:
    (tmp_path / "foo.yaml").write_text(LEGACY_FOO_CRD, encoding="utf-8")

    exit_code = main(["foo.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads((tmp_path / "foo_v2.json").read_text(encoding="utf-8")) == {"a": 1}
    assert "foo_v2.json" in captured.out
    assert "JSON schema written filename=foo_v2.json" in captured.err


def test_filename_format_environment_variable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "foo.yaml").write_text(LEGACY_FOO_CRD, encoding="utf-8")
    monkeypatch.setenv("FILENAME_FORMAT", "schemas/{version}-{kind}")

    exit_code = main(["foo.yaml"])

    assert exit_code == 0
    assert (tmp_path / "schemas" / "v2-foo.json").exists()


def test_empty_filename_format_falls_back_to_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "foo.yaml").write_text(LEGACY_FOO_CRD, encoding="utf-8")
    monkeypatch.setenv("FILENAME_FORMAT", "")

    assert main(["foo.yaml"]) == 0
    assert (tmp_path / "foo_v2.json").exists()


def test_bundle_with_malformed_document_keeps_going(tmp_path: Path, capsys) -> None:
    (tmp_path / "bundle.yaml").write_text(MULTI_VERSION_CRDS, encoding="utf-8")

    exit_code = main(["--output-dir", "generated", "bundle.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 0
    written = sorted(path.name for path in (tmp_path / "generated").iterdir())
    assert written == ["crontab_v1.json", "crontab_v1beta1.json", "widget_v1.json"]
    assert json.loads((tmp_path / "generated" / "widget_v1.json").read_text()) == {}
    assert "Failed to decode YAML" in captured.err
    assert "source=bundle.yaml document=2" in captured.err


def test_unreachable_url_is_logged_and_exit_status_is_zero(tmp_path: Path, capsys) -> None:
    exit_code = main(["https://unreachable.invalid/crds.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert list(tmp_path.iterdir()) == []
    assert "Failed to read source" in captured.err
    assert "source=https://unreachable.invalid/crds.yaml" in captured.err
    assert "files_written=0" in captured.err

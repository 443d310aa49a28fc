import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from paritypack.cli import app as cli_module
from paritypack.cli.app import app
from paritypack.config import ComparisonConfig


def _write_config(tmp_path: Path, **extra) -> Path:
    config_path = tmp_path / "parity.json"
    config_path.write_text(
        json.dumps(
            {
                "real": {
                    "base_url": "https://real.example/gmail/v1",
                    "auth": {"type": "bearer", "token_env": "PARITYKIT_REAL_TOKEN"},
                },
                "clone": {"base_url": "http://clone.example/api"},
                **extra,
            }
        ),
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def backends(monkeypatch: pytest.MonkeyPatch) -> dict[str, list[httpx.Request]]:
    monkeypatch.setenv("PARITYKIT_REAL_TOKEN", "real-token")
    seen: dict[str, list[httpx.Request]] = {"real": [], "clone": []}

    def real_handler(request: httpx.Request) -> httpx.Response:
        seen["real"].append(request)
        return httpx.Response(
            200,
            json={"labels": [{"id": "INBOX", "name": "INBOX", "type": "system"}]},
        )

    def clone_handler(request: httpx.Request) -> httpx.Response:
        seen["clone"].append(request)
        if request.url.path.endswith("/labels/missing"):
            return httpx.Response(404, json={"error": {"code": 404}})
        return httpx.Response(
            200,
            json={"labels": [{"id": "lbl-1", "name": "INBOX", "type": "user"}]},
        )

    def factory(config: ComparisonConfig):
        return config.build_engine(
            real_transport=httpx.MockTransport(real_handler),
            clone_transport=httpx.MockTransport(clone_handler),
        )

    monkeypatch.setattr(cli_module, "_engine_factory", factory)
    return seen


def test_cli_compare_reports_differences(tmp_path: Path, backends) -> None:
    config_path = _write_config(tmp_path)

    result = CliRunner().invoke(app, ["compare", "list-labels", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "list-labels: real=200" in result.stdout
    assert "1 Difference Found" in result.stdout
    assert 'labels[0].type: Real="system" vs Clone="user"' in result.stdout
    assert backends["real"][0].headers["Authorization"] == "Bearer real-token"
    assert "Authorization" not in backends["clone"][0].headers


def test_cli_compare_json_payload(tmp_path: Path, backends) -> None:
    config_path = _write_config(tmp_path)

    result = CliRunner().invoke(
        app, ["compare", "list-labels", "-c", str(config_path), "--json"]
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["endpoint"] == "list-labels"
    assert payload["real"]["url"] == "https://real.example/gmail/v1/users/me/labels"
    assert payload["clone"]["status"] == 200
    assert payload["diff"]["summary"]["paths"] == ["labels[0].type"]
    assert payload["dual_duration"] >= 0


def test_cli_compare_ignore_from_config_and_flags(tmp_path: Path, backends) -> None:
    config_path = _write_config(tmp_path, extra_ignore_fields=["*.type"])

    from_config = CliRunner().invoke(app, ["compare", "list-labels", "-c", str(config_path)])
    no_defaults = CliRunner().invoke(
        app,
        ["compare", "list-labels", "-c", str(config_path), "--no-default-ignore", "--json"],
    )

    assert from_config.exit_code == 0
    assert "Responses Match" in from_config.stdout
    assert no_defaults.exit_code == 1
    assert json.loads(no_defaults.stdout)["diff"]["summary"]["paths"] == [
        "labels[0].id",
        "labels[0].type",
    ]


def test_cli_compare_routes_params(tmp_path: Path, backends) -> None:
    config_path = _write_config(tmp_path)

    result = CliRunner().invoke(
        app,
        ["compare", "get-label", "-c", str(config_path), "-p", "id=missing", "--json"],
    )

    payload = json.loads(result.stdout.strip())
    assert result.exit_code == 1
    assert payload["clone"]["status"] == 404
    assert str(backends["clone"][0].url) == "http://clone.example/api/users/me/labels/missing"


def test_cli_compare_writes_html_report(tmp_path: Path, backends) -> None:
    config_path = _write_config(tmp_path)
    out = tmp_path / "compare.html"

    CliRunner().invoke(app, ["compare", "list-labels", "-c", str(config_path), "--html", str(out)])

    html = out.read_text(encoding="utf-8")
    assert "List Labels (GET /users/me/labels)" in html
    assert "https://real.example/gmail/v1/users/me/labels" in html


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["compare", "list-widgets"], "Unknown endpoint: list-widgets"),
        (["compare", "get-label"], "Missing required parameters for get-label: id"),
        (["compare", "get-label", "-p", "id"], "expected NAME=VALUE"),
    ],
)
def test_cli_compare_usage_errors_exit_2(tmp_path: Path, backends, args, message: str) -> None:
    config_path = _write_config(tmp_path)

    result = CliRunner().invoke(app, [*args, "-c", str(config_path), "--json"])

    assert result.exit_code == 2
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["message"].startswith("compare failed:")
    assert message in payload["message"]
    assert backends["real"] == []


def test_cli_compare_missing_credentials(tmp_path: Path, backends, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PARITYKIT_REAL_TOKEN")
    config_path = _write_config(tmp_path)

    result = CliRunner().invoke(app, ["compare", "list-labels", "-c", str(config_path)])

    assert result.exit_code == 2
    assert "PARITYKIT_REAL_TOKEN" in result.output


def test_cli_compare_directory_config_exits_2(tmp_path: Path, backends) -> None:
    result = CliRunner().invoke(app, ["compare", "list-labels", "-c", str(tmp_path)])

    assert result.exit_code == 2
    assert "compare failed: comparison config unreadable" in result.output
    assert backends["real"] == []

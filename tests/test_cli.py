"""
Tests for the Typer CLI, wired to the in-process backend.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

import cli.doctor as doctor_module
import cli.main as cli_main
from adapters import http_client, pokeapi
from conftest import BASE_URL, FakeBackend, detail_url

runner = CliRunner()


@pytest.fixture
def wired(backend: FakeBackend, monkeypatch) -> FakeBackend:
    monkeypatch.setenv("POKECARDS_API_BASE_URL", BASE_URL)
    monkeypatch.delenv("POKECARDS_LANGUAGE", raising=False)
    original = pokeapi.open_pokeapi_source

    def patched(settings, **kwargs):
        return original(settings, transport=backend.transport(), **kwargs)

    monkeypatch.setattr(cli_main, "open_pokeapi_source", patched)
    return backend


def test_show_renders_sorted_cards(wired):
    wired.add(25, "pikachu", 112)
    wired.add(1, "bulbasaur", 64)

    result = runner.invoke(cli_main.app, ["show"])

    assert result.exit_code == 0, result.output
    assert result.output.index("bulbasaur") < result.output.index("pikachu")
    assert "EXP: 64" in result.output
    assert "EXP: 112" in result.output


def test_show_exits_with_error_on_failed_detail(wired):
    wired.add(7, "squirtle", 63)
    wired.fail(4, "charmander")

    result = runner.invoke(cli_main.app, ["show"])

    assert result.exit_code == 1
    assert "Error: Request failed with status code 500" in result.output
    assert "EXP" not in result.output


def test_show_in_portuguese(wired):
    wired.listing_status = 500

    result = runner.invoke(cli_main.app, ["show", "--language", "pt"])

    assert result.exit_code == 1
    assert "Erro: Request failed with status code 500" in result.output


def test_show_limit_override(wired):
    for i in range(1, 6):
        wired.add(i, f"mon{i}", i)

    result = runner.invoke(cli_main.app, ["show", "--limit", "2"])

    assert result.exit_code == 0, result.output
    assert wired.listing_requests[0].url.params["limit"] == "2"
    assert "mon1" in result.output
    assert "mon3" not in result.output


def test_show_lists_diagnostics(wired):
    wired.add(1, "bulbasaur", 64)
    wired.details[detail_url(1)]["sprites"] = {}

    result = runner.invoke(cli_main.app, ["show", "--diagnostics"])

    assert result.exit_code == 0, result.output
    assert "bulbasaur: sprites.front_default: Field required" in result.output


def test_show_exports(wired, tmp_path):
    wired.add(1, "bulbasaur", 64)
    html_path = tmp_path / "cards.html"
    json_path = tmp_path / "cards.json"

    result = runner.invoke(
        cli_main.app,
        ["show", "--export-html", str(html_path), "--export-json", str(json_path)],
    )

    assert result.exit_code == 0, result.output
    assert "bulbasaur" in html_path.read_text(encoding="utf-8")
    assert json.loads(json_path.read_text(encoding="utf-8"))[0]["id"] == 1


def test_show_skips_json_export_on_error(wired, tmp_path):
    wired.listing_status = 404
    json_path = tmp_path / "cards.json"

    result = runner.invoke(cli_main.app, ["show", "--export-json", str(json_path)])

    assert result.exit_code == 1
    assert not json_path.exists()


def test_doctor_checks_listing_endpoint(backend: FakeBackend, monkeypatch):
    monkeypatch.setenv("POKECARDS_API_BASE_URL", BASE_URL)
    original = http_client.build_async_client

    def patched(settings=None, **kwargs):
        return original(settings, transport=backend.transport(), **kwargs)

    monkeypatch.setattr(doctor_module, "build_async_client", patched)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Listing endpoint" in result.output
    assert backend.listing_requests[0].url.params["limit"] == "1"


def test_doctor_env_file(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(cli_main.app, ["doctor", "env-file"])

    assert result.exit_code == 0
    assert str(tmp_path / "pokecards" / ".env") in result.output

"""Tests for the command line entry point."""

# pylint: disable=missing-function-docstring

import pytest

from dyndnsr53 import __main__ as cli
from dyndnsr53.core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep CLI overrides from leaking into other tests."""
    # setenv records the original values, so teardown also undoes os.environ writes
    monkeypatch.setenv("LISTEN", ":8080")
    monkeypatch.setenv("PROVIDER", "none")
    monkeypatch.setenv("ZONE_ID", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


class TestVersion:
    """Tests for the version subcommand."""

    def test_prints_build_information(self, capsys):
        assert cli.main(["version"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("dyndnsr53 version ")
        assert "Commit: " in out
        assert "Built: " in out


class TestServe:
    """Tests for the serve subcommand."""

    def test_runs_uvicorn_with_listen_address(self, uvicorn_calls):
        assert cli.main(["serve", "--listen", "127.0.0.1:9090", "--provider", "none"]) == 0

        args, kwargs = uvicorn_calls[0]
        assert args == ("dyndnsr53.app:app",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9090

    def test_flags_reach_settings(self, uvicorn_calls):
        cli.main(["serve", "-l", ":8181", "-p", "none"])

        assert get_settings().listen == ":8181"
        assert get_settings().provider == "none"

    def test_route53_requires_zone_id(self, uvicorn_calls, capsys):
        assert cli.main(["serve", "--provider", "route53"]) == 1

        assert "--zone-id is required" in capsys.readouterr().err
        assert uvicorn_calls == []

    def test_unsupported_provider(self, uvicorn_calls, capsys):
        assert cli.main(["serve", "--provider", "cloudflare"]) == 1

        err = capsys.readouterr().err
        assert "unsupported provider type: cloudflare" in err
        assert "Supported providers: route53, none" in err
        assert uvicorn_calls == []

    def test_no_subcommand_serves(self, uvicorn_calls):
        assert cli.main([]) == 0
        assert len(uvicorn_calls) == 1

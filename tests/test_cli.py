"""Tests for the command line interface."""

import httpx
import pytest

from conftest import DELVER, SleepRecorder
from scryfall_search import ScryfallClient, cli
from scryfall_search.transport import HttpTransport


@pytest.fixture
def fake_client(monkeypatch, two_page_transport):
    """Route the CLI's client through the in-memory two-page transport."""
    created = {}

    def factory(**kwargs):
        created.update(kwargs)
        return ScryfallClient(transport=two_page_transport, sleep=SleepRecorder())

    monkeypatch.setattr(cli, "ScryfallClient", factory)
    return created


def test_prices_mode(fake_client, capsys):
    assert cli.main(["t:goblin", "prices"]) == 0
    assert capsys.readouterr().out == "2.62 EUR\n"


def test_names_mode(fake_client, capsys):
    assert cli.main(["t:goblin", "names"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Bolt",
        "Goblin Guide",
        DELVER["name"],
    ]


def test_full_mode(fake_client, capsys):
    assert cli.main(["t:goblin", "full"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("3 cards\n\nBolt\n")
    assert "Insectile Aberration" in out
    assert out.endswith("3/2\n2.62 EUR\n")


def test_default_mode_is_full(fake_client, capsys):
    cli.main(["t:goblin"])
    default_out = capsys.readouterr().out
    cli.main(["t:goblin", "full"])
    assert capsys.readouterr().out == default_out


def test_timeout_forwarded(fake_client):
    cli.main(["t:goblin", "prices", "--timeout", "5"])
    assert fake_client["timeout"] == 5.0


def test_unknown_mode_is_usage_error(fake_client, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["t:goblin", "colors"])
    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_missing_query_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2


def test_fetch_failure_exits_nonzero(fake_client, capsys):
    assert cli.main(["no-such-query", "names"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: HTTP 404")


def test_invalid_query_exits_nonzero(monkeypatch, capsys):
    def factory(**kwargs):
        transport = HttpTransport(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        )
        return ScryfallClient(transport=transport, sleep=SleepRecorder())

    monkeypatch.setattr(cli, "ScryfallClient", factory)
    assert cli.main(["bad\x00query", "names"]) == 1
    assert capsys.readouterr().err.startswith("error: Request to ")

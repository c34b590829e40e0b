"""
Test suite for launching the startup sequence alongside the server.

A fake server object stands in for uvicorn.Server; the client and the
sequence are replaced so no network is involved.
"""

import threading
from types import SimpleNamespace

import pytest

import main
from app.core.config import settings


class FakeServer:
    """Reports started after a given number of polls."""

    def __init__(self, polls_before_start=0, should_exit=False):
        self.polls_before_start = polls_before_start
        self.should_exit = should_exit
        self.polls = 0

    @property
    def started(self):
        self.polls += 1
        return self.polls > self.polls_before_start


class FakeInterestClient:
    instances = []

    def __init__(self, base_url):
        self.base_url = base_url
        self.closed = False
        FakeInterestClient.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


@pytest.fixture
def wiring(monkeypatch):
    """Replace the client, the sequence and sleeping inside main."""
    FakeInterestClient.instances = []
    calls = []
    sleeps = []

    monkeypatch.setattr(main, "InterestClient", FakeInterestClient)
    monkeypatch.setattr(main, "run_startup_sequence", lambda client: calls.append(client))
    monkeypatch.setattr(main, "time", SimpleNamespace(sleep=lambda seconds: sleeps.append(seconds)))

    return SimpleNamespace(calls=calls, sleeps=sleeps)


class TestRunWhenStarted:
    """Tests for main._run_when_started"""

    def test_waits_for_server_start(self, wiring):
        server = FakeServer(polls_before_start=3)

        main._run_when_started(server)

        assert len(wiring.sleeps) == 3
        assert len(wiring.calls) == 1

    def test_runs_once_against_configured_base_url(self, wiring):
        main._run_when_started(FakeServer())

        assert len(FakeInterestClient.instances) == 1
        client = FakeInterestClient.instances[0]
        assert client.base_url == settings.CLIENT_BASE_URL
        assert wiring.calls == [client]
        assert client.closed

    def test_skips_sequence_when_server_exits_before_start(self, wiring):
        server = FakeServer(polls_before_start=10, should_exit=True)

        main._run_when_started(server)

        assert wiring.calls == []
        assert FakeInterestClient.instances == []

    def test_failure_stops_server_and_propagates(self, wiring, monkeypatch):
        def fail(client):
            raise RuntimeError("update failed")

        monkeypatch.setattr(main, "run_startup_sequence", fail)
        server = FakeServer()
        failed = threading.Event()

        with pytest.raises(RuntimeError, match="update failed"):
            main._run_when_started(server, failed)

        assert server.should_exit is True
        assert failed.is_set()

    def test_success_leaves_server_running(self, wiring):
        server = FakeServer()
        failed = threading.Event()

        main._run_when_started(server, failed)

        assert server.should_exit is False
        assert not failed.is_set()

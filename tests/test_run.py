"""Tests for the launcher's readiness probe."""

import responses

from run import URL, _wait_for_server


class TestWaitForServer:
    @responses.activate
    def test_ready(self):
        responses.add(responses.GET, URL, body="ok", status=200)
        assert _wait_for_server(URL, attempts=1, delay=0) is True

    @responses.activate
    def test_becomes_ready(self):
        responses.add(responses.GET, URL, status=503)
        responses.add(responses.GET, URL, body="ok", status=200)
        assert _wait_for_server(URL, attempts=3, delay=0) is True
        assert len(responses.calls) == 2

    @responses.activate
    def test_never_ready(self):
        responses.add(responses.GET, URL, status=500)
        assert _wait_for_server(URL, attempts=2, delay=0) is False
        assert len(responses.calls) == 2

    @responses.activate
    def test_no_sleep_after_last_attempt(self, monkeypatch):
        sleeps: list[float] = []
        monkeypatch.setattr("run.time.sleep", sleeps.append)
        responses.add(responses.GET, URL, status=500)
        assert _wait_for_server(URL, attempts=3, delay=0.5) is False
        assert sleeps == [0.5, 0.5]

    @responses.activate
    def test_connection_refused(self):
        # No registered response: responses raises ConnectionError
        assert _wait_for_server(URL, attempts=2, delay=0) is False

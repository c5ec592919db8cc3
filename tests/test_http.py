"""Unit tests for helperkit.utils.http and helperkit.utils.files."""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest
import requests

from helperkit.utils import files, http
from helperkit.utils.files import download_and_save_file, open_csv_file, open_file
from helperkit.utils.http import HTTPClient


def test_get_joins_base_url_and_applies_timeout(make_response):
    client = HTTPClient(base_url="https://api.example.test/v1/", delay=0)
    client.session.get = Mock(return_value=make_response(json_body={"ok": True}))

    assert client.get_json("items", params={"page": 2}) == {"ok": True}

    client.session.get.assert_called_once_with(
        "https://api.example.test/v1/items", params={"page": 2}, timeout=30
    )


def test_get_keeps_absolute_urls_and_explicit_timeout(make_response):
    client = HTTPClient(base_url="https://api.example.test/", delay=0)
    client.session.get = Mock(return_value=make_response())

    client.get("https://other.example.test/x", timeout=5)

    client.session.get.assert_called_once_with("https://other.example.test/x", timeout=5)


def test_get_raises_on_error_status(make_response):
    client = HTTPClient(delay=0)
    client.session.get = Mock(return_value=make_response(status_code=503))

    with pytest.raises(requests.HTTPError):
        client.get("https://example.test/down")


def test_session_headers_and_retries():
    client = HTTPClient(delay=0)

    assert client.session.headers["User-Agent"] == "helperkit/0.1.0"
    adapter = client.session.get_adapter("https://example.test")
    assert adapter.max_retries.total == 3
    assert 429 in adapter.max_retries.status_forcelist


def test_rate_limit_sleeps_between_requests(monkeypatch, make_response):
    sleeps = []
    clock = iter([100.0, 100.0, 100.2, 101.0])
    fake_time = SimpleNamespace(time=lambda: next(clock), sleep=sleeps.append)
    monkeypatch.setattr(http, "time", fake_time)

    client = HTTPClient(delay=1.0)
    client.last_request_time = 99.5
    client.session.get = Mock(return_value=make_response())

    client.get("https://example.test/a")
    client.get("https://example.test/b")

    assert sleeps == [pytest.approx(0.5), pytest.approx(0.8)]


def test_download_writes_body(tmp_path, make_response):
    client = HTTPClient(delay=0)
    client.session.get = Mock(return_value=make_response(content=b"col1,col2\n1,2\n"))
    dest = tmp_path / "data.csv"

    assert client.download("https://example.test/data.csv", dest) == dest
    assert dest.read_bytes() == b"col1,col2\n1,2\n"
    assert client.session.get.call_args.kwargs["stream"] is True


def test_download_and_save_file_uses_http_client(tmp_path, monkeypatch, make_response):
    monkeypatch.setattr(files.HTTPClient, "get", lambda self, url, **kwargs: make_response(content=b"payload"))
    dest = tmp_path / "out.bin"

    download_and_save_file(dest, "https://example.test/file")

    assert dest.read_bytes() == b"payload"


def test_download_and_save_file_propagates_errors(tmp_path, monkeypatch):
    def fail(self, url, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(files.HTTPClient, "get", fail)

    with pytest.raises(requests.ConnectionError):
        download_and_save_file(tmp_path / "out.bin", "https://example.test/file")
    assert not (tmp_path / "out.bin").exists()


def test_open_file(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\x01")

    with open_file(path) as f:
        assert f.read() == b"\x00\x01"

    with pytest.raises(OSError):
        open_file(tmp_path / "missing.bin")


def test_open_csv_file(tmp_path, caplog):
    path = tmp_path / "rows.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")

    handle = open_csv_file(path)
    assert handle is not None
    with handle:
        assert handle.read() == "a,b\n1,2\n"

    assert open_csv_file(tmp_path / "missing.csv") is None
    assert "Error opening file" in caplog.text

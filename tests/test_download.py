import io
import urllib.error
from pathlib import Path
from unittest import mock

import pytest

from aoc2025.download import DownloadError, download_input


class _Response(io.BytesIO):
    def __init__(self, body: bytes, status: int = 200):
        super().__init__(body)
        self.status = status


def test_writes_body_to_target_folder(tmp_path):
    body = b"L68\nL30\nR48\n"
    with mock.patch("urllib.request.urlopen", return_value=_Response(body)):
        download_input("token", 2025, 5, str(tmp_path))
    assert (tmp_path / "05.txt").read_bytes() == body


def test_request_carries_url_and_session_cookie(tmp_path):
    target = str(tmp_path)
    with mock.patch("urllib.request.urlopen", return_value=_Response(b"x")) as urlopen:
        result = download_input("token", 2025, 5, target)
    assert result is None
    assert (Path(target) / "05.txt").read_bytes() == b"x"
    request = urlopen.call_args.args[0]
    assert request.full_url == "https://adventofcode.com/2025/day/5/input"
    assert request.get_header("Cookie") == "session=token"
    assert request.get_method() == "GET"


def test_default_target_folder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "inputs").mkdir()
    default_folder = ""
    with mock.patch("urllib.request.urlopen", return_value=_Response(b"data")):
        result = download_input("token", 2025, 12, default_folder)
    assert result is None
    assert Path("inputs", "12.txt").read_bytes() == b"data"
    assert not (tmp_path / "12.txt").exists()


def test_non_ok_status_raises(tmp_path):
    with mock.patch("urllib.request.urlopen", return_value=_Response(b"", status=204)):
        with pytest.raises(DownloadError, match="204"):
            download_input("token", 2025, 1, str(tmp_path))
    assert not (tmp_path / "01.txt").exists()


def test_http_error_raises(tmp_path):
    error = urllib.error.HTTPError("http://localhost/", 404, "Not Found", {}, None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(DownloadError, match="404"):
            download_input("token", 2025, 1, str(tmp_path))


def test_missing_folder_raises(tmp_path):
    missing = tmp_path / "absent"
    with mock.patch("urllib.request.urlopen", return_value=_Response(b"x")):
        with pytest.raises(DownloadError, match="cannot create file"):
            download_input("token", 2025, 2, str(missing))
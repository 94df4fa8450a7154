"""Fetching puzzle inputs from the puzzle website."""

import os
import shutil
import urllib.error
import urllib.request

INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"
USER_AGENT = "aoc2025-solver"
DEFAULT_TARGET_FOLDER = "./inputs"


class DownloadError(Exception):
    """Raised when a puzzle input cannot be fetched or stored."""


def download_input(
    session_cookie: str, year: int, day: int, target_folder: str = ""
) -> None:
    """Download the input for ``day`` of ``year`` into ``<target_folder>/<DD>.txt``.

    An empty ``target_folder`` means ``./inputs``.
    """
    folder = target_folder or DEFAULT_TARGET_FOLDER
    request = urllib.request.Request(
        INPUT_URL.format(year=year, day=day),
        headers={
            "User-Agent": USER_AGENT,
            "Cookie": f"session={session_cookie}",
        },
        method="GET",
    )

    try:
        response = urllib.request.urlopen(request)
    except urllib.error.HTTPError as exc:
        raise DownloadError(f"got unexpected status code {exc.code}") from exc
    except urllib.error.URLError as exc:
        raise DownloadError(f"request failed: {exc.reason}") from exc

    with response:
        if response.status != 200:
            raise DownloadError(f"got unexpected status code {response.status}")

        file_path = f"{folder}/{day:02d}.txt"
        try:
            fd = os.open(file_path, os.O_WRONLY | os.O_CREAT, 0o666)
        except FileNotFoundError as exc:
            raise DownloadError(f"cannot create file {file_path!r}: {exc}") from exc
        with os.fdopen(fd, "wb") as file:
            shutil.copyfileobj(response, file)
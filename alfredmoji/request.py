# SPDX-License-Identifier: MIT
"""Wrapper for making requests and caching the downloaded data files."""

from . import VERSION, logger
from .utils import bold

import requests
from requests import Session
from requests_cache import CacheMixin
from requests_ratelimiter import LimiterMixin
from functools import lru_cache
from os import PathLike
from pathlib import Path
from typing import List, Union
from urllib.parse import urlparse


class CachedLimiterSession(CacheMixin, LimiterMixin, Session):
    """Requests session that combines caching and ratelimiting."""


HEADERS = {
    "User-Agent": f"alfredmoji/{VERSION}"
}


class RequestError(Exception):
    """Base class for request exceptions."""


@lru_cache(maxsize=None)
def get_session(cache_dir: str = ".") -> CachedLimiterSession:
    """Return the session keeping its HTTP cache in cache_dir, creating it on first use."""
    return CachedLimiterSession(
        str(Path(cache_dir) / "alfredmoji_cache"), expire_after=180, per_second=1
    )


def request_get(url: str, cache_dir: Union[str, PathLike] = ".") -> str:
    """
    Download the given URL and return its body as text.

    :raises RequestError: if the server could not be reached or did not
        return a 200 response.
    """
    try:
        req = get_session(str(cache_dir)).get(url, headers=HEADERS)
    except requests.exceptions.RequestException as e:
        raise RequestError(str(e)) from e

    if req.status_code != 200:
        logger.warning(f"Request error for {url}: {req.status_code}")
        raise RequestError(req.status_code)

    # unicode.org data files are always UTF-8
    req.encoding = "utf-8"
    return req.text


def cache_path_for_url(url: str, cache_dir: Union[str, PathLike]) -> Path:
    """Get the path a downloaded file is kept at (the URL's file name)."""
    filename = Path(urlparse(url).path).name
    if not filename:
        raise ValueError(f"URL has no file name: {url}")
    return Path(cache_dir) / filename


def fetch_lines(url: str, cache_dir: Union[str, PathLike] = ".") -> List[str]:
    """
    Get the lines of a data file, reusing a previously downloaded copy from
    cache_dir if there is one and downloading it there otherwise.

    :raises RequestError: if the file had to be downloaded and that failed.
    :raises OSError: if the cached copy could not be read.
    :raises UnicodeDecodeError: if the cached copy is not valid UTF-8.
    """
    path = cache_path_for_url(url, cache_dir)

    if path.is_file():
        logger.info(f"Using existing file: {bold(str(path))}")
        return path.read_text(encoding="utf-8").splitlines()

    logger.info(f"Downloading file: {bold(url)}")
    lines = request_get(url, cache_dir).splitlines()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not save {path} for later runs: {e}")

    return lines

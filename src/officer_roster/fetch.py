"""
Remote document fetch collaborators.

The account manager never talks to the network itself. It hands a URL to a
Fetcher and waits for exactly one of two callbacks:

    on_success(text)   - document body
    on_error(reason)   - any failure (network, non-2xx, bad body)

A host with its own event loop supplies its own Fetcher and invokes the
callbacks later. RequestsFetcher is a blocking default that completes
before load_url() returns.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Mapping

import requests

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]


@dataclass(frozen=True)
class FetchError(RuntimeError):
    url: str
    status_code: int | None
    message: str

    def __str__(self) -> str:
        code = self.status_code if self.status_code is not None else "unknown"
        return f"HTTP {code} for {self.url}: {self.message}"


class Fetcher(ABC):
    """Fetch collaborator contract."""

    @abstractmethod
    def load_url(self, url: str, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        """Start fetching ``url``; call exactly one of the callbacks once."""


def get_text(
    url: str,
    *,
    timeout_s: float = 10.0,
    headers: Mapping[str, str] | None = None,
) -> str:
    if not url:
        raise FetchError(url=str(url), status_code=None, message="No URL configured")
    try:
        resp = requests.get(str(url), headers=dict(headers or {}), timeout=float(timeout_s))
    except requests.RequestException as e:
        raise FetchError(url=str(url), status_code=None, message=str(e)) from e
    if resp.status_code // 100 != 2:
        raise FetchError(url=str(url), status_code=int(resp.status_code), message=resp.text[:500])
    return resp.text


class RequestsFetcher(Fetcher):
    """Blocking HTTP GET via requests."""

    def __init__(self, timeout_s: float = 10.0, headers: Mapping[str, str] | None = None):
        self.timeout_s = timeout_s
        self.headers = dict(headers or {})

    def load_url(self, url: str, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        try:
            text = get_text(url, timeout_s=self.timeout_s, headers=self.headers)
        except FetchError as e:
            on_error(str(e))
            return
        on_success(text)


__all__ = ["Fetcher", "RequestsFetcher", "FetchError", "get_text"]

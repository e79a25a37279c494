"""Module: remote_source.py

Date: 2026-10-19

Download grid rows from a JSON endpoint.

The endpoint must answer with a JSON array of row objects. Any transport
failure, non-success status or malformed body is reported as
RemoteLoadError; callers turn it into a user-facing error message.
"""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tabgrid.config import REMOTE_DEFAULT_METHOD, REMOTE_FETCH_TIMEOUT, REMOTE_USER_AGENT
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class RemoteLoadError(Exception):
    """Raised when remote rows cannot be downloaded or decoded."""


@dataclass(frozen=True)
class RemoteSource:
    """Where to load rows from.

    ``request_options`` keys: ``method``, ``headers`` (mapping), ``body``
    (str, bytes, or a JSON-serializable object) and ``timeout`` (seconds).
    """

    url: str
    request_options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def method(self) -> str:
        return str(self.request_options.get("method") or REMOTE_DEFAULT_METHOD).upper()

    @property
    def timeout(self) -> float:
        return float(self.request_options.get("timeout") or REMOTE_FETCH_TIMEOUT)

    def build_request(self) -> urllib.request.Request:
        headers = {"User-Agent": REMOTE_USER_AGENT, "Accept": "application/json"}
        headers.update(self.request_options.get("headers") or {})

        body = self.request_options.get("body")
        data: bytes | None
        if body is None:
            data = None
        elif isinstance(body, bytes):
            data = body
        elif isinstance(body, str):
            data = body.encode("utf-8")
        else:
            data = json.dumps(body).encode("utf-8")
            headers.setdefault("Content-Type", "application/json")

        return urllib.request.Request(self.url, data=data, headers=headers, method=self.method)


def fetch_json(source: RemoteSource) -> Any:
    """Perform the request and decode the JSON body.

    Raises:
        RemoteLoadError: On non-success status, connection failure or a body
            that is not valid JSON

    """
    request = source.build_request()
    try:
        with urllib.request.urlopen(request, timeout=source.timeout) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                raise RemoteLoadError(f"Request failed with status {status}")
            raw = response.read()
    except urllib.error.HTTPError as e:
        raise RemoteLoadError(f"Request failed with status {e.code}") from e
    except urllib.error.URLError as e:
        raise RemoteLoadError(f"Connection error: {e.reason}") from e
    except TimeoutError as e:
        raise RemoteLoadError("Request timed out") from e
    except OSError as e:
        raise RemoteLoadError(f"Network error: {e}") from e

    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RemoteLoadError(f"Invalid JSON response: {e}") from e


def fetch_rows(source: RemoteSource) -> Any:
    """Download the raw row payload of ``source``.

    The payload is returned untransformed; a caller-supplied transformer may
    still reshape it, so only the JSON decoding is checked here.
    """
    logger.debug("[RemoteSource] %s %s", source.method, source.url, extra={"dev_only": True})
    payload = fetch_json(source)
    logger.info("Fetched remote rows from %s", source.url)
    return payload

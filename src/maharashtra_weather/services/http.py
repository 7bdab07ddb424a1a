"""
Shared HTTP client for outbound provider calls.

Provides a pre-configured ``requests.Session`` with retries switched off:
a failed lookup is reported to the user, who re-triggers it by hand.
Datasource modules should use this instead of bare ``requests.get``.

Usage::

    from maharashtra_weather.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from maharashtra_weather import __version__
from maharashtra_weather.config import get_settings

#: Single attempt per request, including on connection errors.
NO_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

USER_AGENT = f"maharashtra-weather/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request. ``None`` keeps
            the transport default.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session. Import and use directly.
session: requests.Session = create_session(timeout=get_settings().request_timeout)

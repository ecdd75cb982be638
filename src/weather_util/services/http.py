"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a User-Agent header and
a default timeout. Requests are not retried; a failed call surfaces to the
caller immediately.

Usage::

    from weather_util.services.http import session

    resp = session.get("https://api.openweathermap.org/data/2.5/weather", params=...)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests

from weather_util import __version__

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"weather-util/{__version__}"


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """
    Build a ``requests.Session`` with the default headers and timeout.

    Args:
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    s.headers["User-Agent"] = USER_AGENT

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


#: Module-level session; import and use directly.
session: requests.Session = create_session()

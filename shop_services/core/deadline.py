"""
Deadline derivation for outbound calls.

Each peer call made while serving a request is bounded by the smaller
of a fixed ceiling (``Settings.user_lookup_timeout``) and whatever
budget the caller declared for the inbound request.  Callers declare a
budget with the ``X-Request-Timeout`` header, in seconds.
"""

from typing import Optional

REQUEST_TIMEOUT_HEADER = "X-Request-Timeout"


def bounded_timeout(ceiling: float, inbound: Optional[float] = None) -> float:
    """Return the timeout to apply to a peer call.

    >>> bounded_timeout(3.0)
    3.0
    >>> bounded_timeout(3.0, 1.5)
    1.5
    >>> bounded_timeout(3.0, 10)
    3.0
    """
    if inbound is None:
        return ceiling
    return max(0.0, min(ceiling, inbound))


def parse_timeout_header(value: Optional[str]) -> Optional[float]:
    """Parse an ``X-Request-Timeout`` header value.

    Returns ``None`` when the header is absent.  Raises ``ValueError``
    for values that are not a finite non-negative number.
    """
    if value is None:
        return None
    seconds = float(value)
    if seconds != seconds or seconds < 0 or seconds == float("inf"):
        raise ValueError(f"invalid timeout: {value!r}")
    return seconds

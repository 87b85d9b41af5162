"""Wall-clock access for Datewise.

Every function that compares against "now" takes an optional reference
instant. When it is omitted, the current local time is read here, so tests
can either pass a fixed reference or patch ``local_now``.
"""

from __future__ import annotations

import datetime as _dt


def local_now() -> _dt.datetime:
    """Return the current local wall-clock time as a naive datetime."""
    return _dt.datetime.now()


def resolve_reference(now: _dt.datetime | None) -> _dt.datetime:
    """Return ``now`` if given, otherwise the current local time.

    Examples:
        >>> ref = _dt.datetime(2024, 3, 5, 12, 0, 0)
        >>> resolve_reference(ref) is ref
        True
    """
    if now is None:
        return local_now()
    return now


__all__ = ["local_now", "resolve_reference"]

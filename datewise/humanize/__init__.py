"""Human-readable descriptions of instants.

Functions:
    time_ago: Phrase such as "3 hours ago" or "Yesterday".

Examples:
    >>> import datetime
    >>> from datewise.humanize import time_ago
    >>> ref = datetime.datetime(2024, 3, 5, 12, 0, 0)
    >>> time_ago(datetime.datetime(2024, 3, 5, 9, 0, 0), now=ref)
    '3 hours ago'
"""

from __future__ import annotations

from datewise.humanize._relative import time_ago

__all__: list[str] = ["time_ago"]

"""Unique suffixes for scoping component CSS classes.

Every rendered component gets its own class names so that several
instances can live on one page without their styles or scripts colliding.
"""

import itertools
import secrets
import threading

_counter = itertools.count(1)
_lock = threading.Lock()


def unique_number() -> str:
    """Return a digit string that is unique within the running process.

    The first four digits are random (so ids differ between processes),
    the rest is a zero-padded call counter (so ids never repeat).
    """
    with _lock:
        count = next(_counter)
    prefix = secrets.randbelow(9000) + 1000
    return f"{prefix}{count:04d}"

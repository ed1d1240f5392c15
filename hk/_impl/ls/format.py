import re
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Optional
from typing import Protocol

import orjson

_PLAIN_WORD = re.compile(r"[0-9A-Za-z_-]*")

_RECENT = timedelta(days=12 * 30)

_DURATION_UNITS = (
    (timedelta(days=1), "d"),
    (timedelta(hours=1), "h"),
    (timedelta(minutes=1), "m"),
)


class Writer(Protocol):
    def write(self, text: str) -> int: ...


def abbrev(s: str, n: int) -> str:
    if len(s) > n:
        return s[: n - 1] + "…"
    return s


def pretty_time(t: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Formats `t` in local time as "Jan _2 15:04", or "Jan _2  2006" once it is
    about a year old.
    """
    if t is None:
        return ""
    now = now or datetime.now(timezone.utc)
    local = t.astimezone()
    if now - t < _RECENT:
        return f"{local:%b} {local.day:2d} {local:%H:%M}"
    return f"{local:%b} {local.day:2d}  {local.year}"


def _round_duration(d: timedelta, unit: timedelta) -> int:
    us = d // timedelta(microseconds=1)
    unit_us = unit // timedelta(microseconds=1)
    return (us + unit_us // 2 - 1) // unit_us


def pretty_duration(d: timedelta) -> str:
    """
    Formats `d` in the largest of days, hours or minutes it exceeds twice,
    falling back to seconds, e.g. "15h" or " 1m".
    """
    for unit, suffix in _DURATION_UNITS:
        if d > 2 * unit:
            return f"{_round_duration(d, unit):2d}{suffix}"
    return f"{_round_duration(d, timedelta(seconds=1)):2d}s"


def slug_size(size: Optional[int]) -> str:
    return f"{((size or 0) + 501) // 1000:6d}k"


def quote(s: str) -> str:
    return orjson.dumps(s).decode("utf-8")


def maybe_quote(s: str) -> str:
    """
    Quotes `s` as a JSON string if it has anything other than [alnum]_-
    """
    if _PLAIN_WORD.fullmatch(s):
        return s
    return quote(s)


def list_rec(w: Writer, *fields: str) -> None:
    w.write("\t".join(fields) + "\n")

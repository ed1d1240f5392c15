import asyncio
import logging
import os
import urllib.parse
from datetime import datetime
from enum import Enum
from typing import Any
from typing import Coroutine
from typing import Optional
from typing import Tuple
from typing import Union

log = logging.getLogger(__name__)


class StrEnum(str, Enum):
    def __str__(self) -> str:
        # https://stackoverflow.com/a/74440069
        return str.__str__(self)


class HkEnvVar(StrEnum):
    API_KEY = "HEROKU_API_KEY"
    API_URL = "HEROKU_API_URL"
    APP = "HKAPP"
    DEBUG = "HKDEBUG"

    def get(self) -> Optional[str]:
        return os.environ.get(self.value)


def is_debug() -> bool:
    return (HkEnvVar.DEBUG.get() or "").lower() in ("1", "true")


def encode_uri_component(s: str) -> str:
    """
    This should have the same behavior as encodeURIComponent from JS.

    https://stackoverflow.com/a/6618858
    """
    return urllib.parse.quote(s, safe="()*!.'")


async def all_settled(coroutines: list[Coroutine[Any, Any, Any]]) -> Tuple[Union[BaseException, Any]]:
    """
    Runs all the coroutines in parallel and waits for all of them to finish,
    regardless of whether they succeed or fail. Similar to Promise.allSettled.
    """
    # mypy error:
    # Returning Any from function declared to return "tuple[BaseException | Any]"  [no-any-return]
    return await asyncio.gather(*coroutines, return_exceptions=True)  # type: ignore


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parses an ISO 8601 timestamp as returned by the platform API, e.g. 2012-01-01T12:00:00Z.
    """
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)

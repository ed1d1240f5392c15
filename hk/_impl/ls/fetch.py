import logging
from typing import Any
from typing import Awaitable
from typing import Callable
from typing import List
from typing import Sequence
from typing import TypeVar

from hk._impl.util import all_settled

log = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_all(
    names: Sequence[str],
    fetch: Callable[[str], Awaitable[T]],
    on_error: Callable[[str, Exception], None],
) -> List[T]:
    """
    Fetches every non-empty name concurrently and waits for all of them.

    Failed fetches are handed to `on_error` and left out of the result; they
    never stop the others. Callers sort the result themselves.
    """
    wanted = [name for name in names if name]
    if not wanted:
        return []

    results = await all_settled([fetch(name) for name in wanted])  # type: ignore[list-item]

    fetched: List[T] = []
    for name, result in zip(wanted, results):
        if isinstance(result, Exception):
            log.debug(f"Failed to fetch '{name}'", exc_info=result)
            on_error(name, result)
        elif isinstance(result, BaseException):
            raise result
        else:
            fetched.append(result)
    return fetched


def sort_by_name(items: Sequence[Any]) -> List[Any]:
    return sorted(items, key=lambda item: item.name)

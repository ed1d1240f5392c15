import asyncio
from dataclasses import dataclass

import pytest

from hk._impl.ls.fetch import fetch_all
from hk._impl.ls.fetch import sort_by_name


@dataclass
class Named:
    name: str
    tag: str = ""


class FakeFetcher:
    def __init__(self, failing=()):
        self.calls = []
        self.failing = set(failing)

    async def __call__(self, name):
        self.calls.append(name)
        # Let every other fetch start before any finishes
        await asyncio.sleep(0)
        if name in self.failing:
            raise LookupError(f"no such thing: {name}")
        return Named(name)


@pytest.mark.asyncio
async def test_fetch_all_skips_empty_names():
    fetch = FakeFetcher()
    errors = []

    results = await fetch_all(["b", "", "a", ""], fetch, lambda name, err: errors.append(name))

    assert sorted(fetch.calls) == ["a", "b"]
    assert sorted(r.name for r in results) == ["a", "b"]
    assert errors == []


@pytest.mark.asyncio
async def test_fetch_all_with_no_names():
    fetch = FakeFetcher()

    assert await fetch_all([], fetch, lambda name, err: None) == []
    assert await fetch_all(["", ""], fetch, lambda name, err: None) == []
    assert fetch.calls == []


@pytest.mark.asyncio
async def test_fetch_all_keeps_successes_when_some_fail():
    fetch = FakeFetcher(failing={"x", "y", "z"})
    errors = []

    results = await fetch_all(["a", "x", "b", "y", "z"], fetch, lambda name, err: errors.append((name, str(err))))

    assert len(fetch.calls) == 5
    assert sorted(r.name for r in results) == ["a", "b"]
    assert sorted(errors) == [
        ("x", "no such thing: x"),
        ("y", "no such thing: y"),
        ("z", "no such thing: z"),
    ]


@pytest.mark.asyncio
async def test_fetch_all_runs_concurrently():
    started = []
    release = asyncio.Event()

    async def fetch(name):
        started.append(name)
        if len(started) == 3:
            release.set()
        # Would hang if fetches ran one at a time
        await asyncio.wait_for(release.wait(), timeout=5)
        return Named(name)

    results = await fetch_all(["a", "b", "c"], fetch, lambda name, err: None)

    assert len(results) == 3


def test_sort_by_name():
    items = [Named("web.2"), Named("run.3794"), Named("web.1")]
    assert [i.name for i in sort_by_name(items)] == ["run.3794", "web.1", "web.2"]


def test_sort_by_name_is_byte_order():
    items = [Named("b"), Named("B"), Named("a"), Named("_")]
    assert [i.name for i in sort_by_name(items)] == ["B", "_", "a", "b"]


def test_sort_by_name_is_stable():
    items = [Named("b", "first"), Named("a"), Named("b", "second")]
    assert [(i.name, i.tag) for i in sort_by_name(items)] == [("a", ""), ("b", "first"), ("b", "second")]

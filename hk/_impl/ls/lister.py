import logging
from dataclasses import replace
from typing import List
from typing import Optional
from typing import Sequence

import click

from hk._impl.api.client import HkAPIClient
from hk._impl.api.exceptions import MissingAppError
from hk._impl.api.models import App
from hk._impl.api.models import MergedAddon
from hk._impl.api.models import Release
from hk._impl.git import describe_commits
from hk._impl.ls.abbrev import abbrev_addon_owners
from hk._impl.ls.abbrev import abbrev_app_owners
from hk._impl.ls.abbrev import abbrev_release_users
from hk._impl.ls.fetch import fetch_all
from hk._impl.ls.fetch import sort_by_name
from hk._impl.ls.format import Writer
from hk._impl.ls.models import AppView
from hk._impl.ls.render import render_addon
from hk._impl.ls.render import render_app
from hk._impl.ls.render import render_dyno
from hk._impl.ls.render import render_release
from hk._impl.util import all_settled

log = logging.getLogger(__name__)


def matches_noun(noun: str, arg: str) -> bool:
    """True if `arg` abbreviates `noun`, e.g. "rel" for "releases"."""
    return bool(arg) and noun.startswith(arg)


def addon_match(m: MergedAddon, filters: Sequence[str]) -> bool:
    """`filters` must already be lower-cased."""
    fields = (m.type.lower(), m.name.lower(), m.config_var.lower())
    return any(s in fields for s in filters)


def report_error(name: str, err: Exception) -> None:
    click.echo(str(err), err=True)


class Lister:
    """
    Lists apps, releases, addons or dynos to `writer`.

    Everything fetched for one listing is fetched before anything is written.
    """

    def __init__(
        self,
        client: HkAPIClient,
        writer: Writer,
        long: bool = False,
        follow: bool = False,
        app: Optional[str] = None,
    ) -> None:
        self._client = client
        self._w = writer
        self._long = long
        self._follow = follow
        self._app = app

    def must_app(self) -> str:
        if not self._app:
            raise MissingAppError()
        return self._app

    async def run(self, args: Sequence[str]) -> None:
        if not args:
            apps = await self._client.get_apps()
            await self.print_app_list(apps)
            return

        a0, rest = args[0], list(args[1:])
        if matches_noun("releases", a0):
            await self.list_releases(rest)
        elif matches_noun("addons", a0):
            await self.list_addons(rest)
        elif matches_noun("dynos", a0):
            await self.list_dynos(rest)
        else:
            await self.list_apps(list(args))

    async def list_apps(self, names: Sequence[str]) -> None:
        apps = await fetch_all(names, self._client.get_app, report_error)
        await self.print_app_list(apps)

    async def print_app_list(self, apps: List[App]) -> None:
        views, suffix = abbrev_app_owners(sort_by_name(apps))
        if self._follow:
            views = await self.follow_app_attachments(views, suffix)
        for view in views:
            render_app(self._w, view, long=self._long, follow=self._follow)

    async def follow_app_attachments(self, views: List[AppView], suffix: str) -> List[AppView]:
        results = await all_settled([self._client.get_merged_addons(view.name) for view in views])

        followed: List[AppView] = []
        for view, result in zip(views, results):
            if isinstance(result, Exception):
                log.debug(f"Failed to fetch attachments of '{view.name}'", exc_info=result)
                report_error(view.name, result)
                followed.append(view)
            elif isinstance(result, BaseException):
                raise result
            else:
                followed.append(replace(view, attachments=abbrev_addon_owners(result, suffix)))
        return followed

    async def list_releases(self, names: Sequence[str]) -> None:
        app = self.must_app()
        releases: List[Release]
        if not names:
            # Already in release order; sorting by name would put v10 before v2
            releases = await self._client.get_releases(app)
        else:
            releases = await fetch_all(names, lambda name: self._client.get_release(app, name), report_error)
            releases = sort_by_name(releases)

        tags = describe_commits(release.commit for release in releases)
        for view in abbrev_release_users(releases, tags):
            render_release(self._w, view, long=self._long)

    async def list_addons(self, names: Sequence[str]) -> None:
        addons = abbrev_addon_owners(await self._client.get_merged_addons(self.must_app()))
        filters = [name.lower() for name in names]
        for m in addons:
            if not filters or addon_match(m, filters):
                render_addon(self._w, m, long=self._long)

    async def list_dynos(self, names: Sequence[str]) -> None:
        dynos = sort_by_name(await self._client.get_dynos(self.must_app()))

        if not names:
            for dyno in dynos:
                render_dyno(self._w, dyno, long=self._long)
            return

        for name in names:
            for dyno in dynos:
                if dyno.name == name:
                    render_dyno(self._w, dyno, long=self._long)

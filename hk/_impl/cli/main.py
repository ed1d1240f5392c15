import asyncio
import logging
import sys
from typing import Optional
from typing import Tuple

import click

from hk._impl.api.client import HkAPIClient
from hk._impl.api.exceptions import HkError
from hk._impl.ls.lister import Lister
from hk._impl.ls.tabwriter import TabWriter
from hk._impl.util import HkEnvVar
from hk._impl.util import is_debug

LS_HELP = """List apps, addons, dynos, and releases.

\b
    hk ls [-l] [-f] [app...]
    hk ls [-l] [-a app] releases [name...]
    hk ls [-l] [-a app] addons [name...]
    hk ls [-l] [-a app] dynos [name...]

Nouns may be abbreviated, e.g. "rel" for releases.

Long listing shows, for apps, the owner, slug size, last release time (or
the time the app was created, if it's never been released) and the app
name. For releases, the git commit id, who made the release, time of the
release, name of the release (e.g. v1) and description. For addons, the
type of the addon, owner, name of the resource and the config var it's
attached to. For dynos, the name, state, age and command.

\b
Examples:
    $ hk ls -l dynos
    run.3794  up   1m  bash
    web.1     up  15h  "blog /app /tmp/dst"

\b
    $ hk ls -l addons REDIS_URL
    redistogo:nano  me  soaring-ably-1234  REDIS_URL
"""


async def _ls(args: Tuple[str, ...], long: bool, follow: bool, app: Optional[str]) -> None:
    writer = TabWriter(sys.stdout)
    try:
        async with HkAPIClient() as client:
            await Lister(client, writer, long=long, follow=follow, app=app).run(args)
    finally:
        writer.flush()


@click.group()
def hk() -> None:
    """Command-line client for the platform API."""
    pass


@hk.command(help=LS_HELP)
@click.option("-l", "long", is_flag=True, help="Long listing.")
@click.option("-f", "follow", is_flag=True, help="Follow attachments: list each app's addons after it.")
@click.option("-a", "app", envvar=HkEnvVar.APP.value, help="App name.")
@click.argument("args", nargs=-1)
def ls(long: bool, follow: bool, app: Optional[str], args: Tuple[str, ...]) -> None:
    try:
        asyncio.run(_ls(args, long, follow, app))
    except (HkError, ValueError) as e:
        raise click.ClickException(str(e))


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if is_debug() else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    hk()

from datetime import datetime
from typing import Optional

from hk._impl.api.models import Dyno
from hk._impl.api.models import MergedAddon
from hk._impl.ls.format import Writer
from hk._impl.ls.format import abbrev
from hk._impl.ls.format import list_rec
from hk._impl.ls.format import maybe_quote
from hk._impl.ls.format import pretty_duration
from hk._impl.ls.format import pretty_time
from hk._impl.ls.format import slug_size
from hk._impl.ls.models import AppView
from hk._impl.ls.models import ReleaseView

OWNER_WIDTH = 10
COMMIT_WIDTH = 10


def _or_unknown(s: str) -> str:
    return s or "?"


def render_app(w: Writer, view: AppView, long: bool = False, follow: bool = False) -> None:
    if not long:
        w.write(view.name + "\n")
        if follow:
            for m in view.attachments:
                w.write((m.name or f"({m.type})") + "\n")
        return

    app = view.app
    if follow:
        w.write("-\t")
    list_rec(
        w,
        "app",
        abbrev(view.owner, OWNER_WIDTH),
        slug_size(app.slug_size),
        pretty_time(app.released_at or app.created_at),
        app.name,
    )
    if follow:
        for m in view.attachments:
            list_rec(
                w,
                " ",
                m.type,
                abbrev(m.owner, OWNER_WIDTH),
                "     ?k",
                "",
                _or_unknown(m.name),
                _or_unknown(m.config_var),
            )


def render_release(w: Writer, view: ReleaseView, long: bool = False) -> None:
    if not long:
        w.write(view.name + "\n")
        return
    release = view.release
    list_rec(
        w,
        abbrev(view.commit_ref, COMMIT_WIDTH),
        abbrev(view.user, OWNER_WIDTH),
        pretty_time(release.created_at),
        release.name,
        release.description,
    )


def render_dyno(w: Writer, dyno: Dyno, long: bool = False, now: Optional[datetime] = None) -> None:
    if not long:
        w.write(dyno.name + "\n")
        return
    list_rec(
        w,
        dyno.name,
        dyno.state,
        pretty_duration(dyno.age(now)),
        maybe_quote(dyno.command),
    )


def render_addon(w: Writer, m: MergedAddon, long: bool = False) -> None:
    if not long:
        w.write(m.label() + "\n")
        return
    list_rec(
        w,
        m.type,
        abbrev(m.owner, OWNER_WIDTH),
        _or_unknown(m.name),
        _or_unknown(m.config_var),
    )

"""
Shortens owner emails for display by dropping the domain most of them share.

Records are never modified; each helper returns display values instead.
"""

from collections import Counter
from dataclasses import replace
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple

from hk._impl.api.models import App
from hk._impl.api.models import MergedAddon
from hk._impl.api.models import Release
from hk._impl.git import commit_ref
from hk._impl.ls.models import AppView
from hk._impl.ls.models import ReleaseView


def common_email_suffix(emails: Iterable[str]) -> str:
    """
    Returns the most common "@domain" suffix among `emails`, or "" if none has one.

    Ties go to the suffix that sorts first.
    """
    domains: Counter[str] = Counter()
    for email in emails:
        parts = email.split("@", 1)
        if len(parts) == 2:
            domains["@" + parts[1]] += 1

    smax, nmax = "", 0
    for suffix in sorted(domains):
        if domains[suffix] > nmax:
            smax, nmax = suffix, domains[suffix]
    return smax


def strip_suffix(email: str, suffix: str) -> str:
    if suffix and email.endswith(suffix):
        return email[: -len(suffix)]
    return email


def abbrev_app_owners(apps: List[App]) -> Tuple[List[AppView], str]:
    suffix = common_email_suffix(app.owner.email for app in apps)
    views = [AppView(app=app, owner=strip_suffix(app.owner.email, suffix)) for app in apps]
    return views, suffix


def abbrev_release_users(releases: List[Release], tags: Optional[Dict[str, str]] = None) -> List[ReleaseView]:
    tags = tags or {}
    suffix = common_email_suffix(release.user for release in releases)
    return [
        ReleaseView(
            release=release,
            user=strip_suffix(release.user, suffix),
            commit_ref=commit_ref(release.commit, tags.get(release.commit)),
        )
        for release in releases
    ]


def abbrev_addon_owners(addons: List[MergedAddon], suffix: str = "") -> List[MergedAddon]:
    # Follow mode passes in the suffix already picked for the app list
    if not suffix:
        suffix = common_email_suffix(addon.owner for addon in addons)
    return [replace(addon, owner=strip_suffix(addon.owner, suffix)) for addon in addons]

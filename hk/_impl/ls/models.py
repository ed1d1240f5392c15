from dataclasses import dataclass
from dataclasses import field
from typing import List

from hk._impl.api.models import App
from hk._impl.api.models import MergedAddon
from hk._impl.api.models import Release


@dataclass(frozen=True)
class AppView:
    """An app as displayed: owner shortened, attachments resolved in follow mode."""

    app: App
    owner: str
    attachments: List[MergedAddon] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.app.name


@dataclass(frozen=True)
class ReleaseView:
    release: Release
    user: str
    commit_ref: str

    @property
    def name(self) -> str:
        return self.release.name

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import List
from typing import Optional


@dataclass(frozen=True)
class Owner:
    email: str
    id: Optional[str] = None


@dataclass(frozen=True)
class App:
    name: str
    owner: Owner
    created_at: datetime
    released_at: Optional[datetime] = None
    slug_size: Optional[int] = None


@dataclass(frozen=True)
class Release:
    name: str
    commit: str
    user: str
    created_at: datetime
    description: str


@dataclass(frozen=True)
class Dyno:
    name: str
    state: str
    command: str
    started_at: datetime

    def age(self, now: Optional[datetime] = None) -> timedelta:
        return (now or datetime.now(timezone.utc)) - self.started_at


@dataclass(frozen=True)
class Addon:
    """An add-on provisioned for an app, exposed through one or more config vars."""

    name: str
    plan: str
    config_vars: List[str] = field(default_factory=list)
    owner: str = ""


@dataclass(frozen=True)
class Attachment:
    """A resource bound to an app under the config var `name`."""

    name: str
    resource_name: str
    resource_type: str
    owner: str = ""


@dataclass(frozen=True)
class MergedAddon:
    type: str
    owner: str
    name: str
    config_var: str

    def label(self) -> str:
        if self.config_var:
            return self.config_var
        return f"({self.type})"

from hk._impl.api.models import Addon
from hk._impl.api.models import App
from hk._impl.api.models import Attachment
from hk._impl.api.models import Dyno
from hk._impl.api.models import MergedAddon
from hk._impl.api.models import Owner
from hk._impl.api.models import Release

__all__ = [
    "Addon",
    "App",
    "Attachment",
    "Dyno",
    "MergedAddon",
    "Owner",
    "Release",
]

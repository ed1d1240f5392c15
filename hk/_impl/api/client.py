"""Platform API Client."""

import json
import logging
from datetime import timedelta
from types import TracebackType
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Type

import httpx

from hk._impl.api.exceptions import APIError
from hk._impl.api.exceptions import parse_error_response
from hk._impl.api.models import Addon
from hk._impl.api.models import App
from hk._impl.api.models import Attachment
from hk._impl.api.models import Dyno
from hk._impl.api.models import MergedAddon
from hk._impl.api.models import Owner
from hk._impl.api.models import Release
from hk._impl.config.constants import API_ACCEPT
from hk._impl.config.constants import API_ENDPOINT
from hk._impl.util import HkEnvVar
from hk._impl.util import all_settled
from hk._impl.util import encode_uri_component
from hk._impl.util import parse_timestamp

log = logging.getLogger(__name__)


def _email(data: Any) -> str:
    # Owners and users come back either as a bare string or as {"email": ..., "id": ...}
    if isinstance(data, dict):
        return data.get("email") or ""
    return data or ""


def make_app(data: Dict[str, Any]) -> App:
    owner = data.get("owner") or {}
    return App(
        name=data["name"],
        owner=Owner(email=_email(owner), id=owner.get("id") if isinstance(owner, dict) else None),
        created_at=parse_timestamp(data["created_at"]),  # type: ignore[arg-type]
        released_at=parse_timestamp(data.get("released_at")),
        slug_size=data.get("slug_size"),
    )


def make_release(data: Dict[str, Any]) -> Release:
    name = data.get("name")
    if not name and data.get("version") is not None:
        name = f"v{data['version']}"
    return Release(
        name=name or "",
        commit=data.get("commit") or "",
        user=_email(data.get("user")),
        created_at=parse_timestamp(data["created_at"]),  # type: ignore[arg-type]
        description=data.get("description") or "",
    )


def make_dyno(data: Dict[str, Any]) -> Dyno:
    return Dyno(
        name=data["name"],
        state=data.get("state") or "",
        command=data.get("command") or "",
        started_at=parse_timestamp(data.get("updated_at") or data["created_at"]),  # type: ignore[arg-type]
    )


def make_addon(data: Dict[str, Any]) -> Addon:
    plan = data.get("plan") or {}
    return Addon(
        name=data.get("name") or "",
        plan=plan.get("name", "") if isinstance(plan, dict) else plan,
        config_vars=list(data.get("config_vars") or []),
        owner=_email(data.get("owner")),
    )


def make_attachment(data: Dict[str, Any]) -> Attachment:
    resource = data.get("resource") or {}
    return Attachment(
        name=data.get("name") or "",
        resource_name=resource.get("name") or "",
        resource_type=resource.get("type") or "",
        owner=_email(resource.get("owner")),
    )


def merge_addons(addons: List[Addon], attachments: List[Attachment]) -> List[MergedAddon]:
    """
    Joins add-ons and attachments into one row per config var.

    Attachments win over add-ons exposing the same config var.
    """
    merged = [
        MergedAddon(
            type=attachment.resource_type,
            owner=attachment.owner,
            name=attachment.resource_name,
            config_var=attachment.name,
        )
        for attachment in attachments
    ]
    attached = {m.config_var for m in merged if m.config_var}
    for addon in addons:
        config_vars = addon.config_vars or [""]
        for config_var in config_vars:
            if config_var and config_var in attached:
                continue
            merged.append(MergedAddon(type=addon.plan, owner=addon.owner, name=addon.name, config_var=config_var))
    return sorted(merged, key=lambda m: (m.config_var, m.type, m.name))


class HkAPIClient:
    def __init__(self, api_key: Optional[str] = None, timeout: timedelta = timedelta(seconds=30)) -> None:
        api_key = api_key or HkEnvVar.API_KEY.get()
        if not api_key:
            raise ValueError(f"You must provide an api_key or set the {HkEnvVar.API_KEY} environment variable.")
        self._client = httpx.AsyncClient(
            base_url=API_ENDPOINT,
            headers={
                "Accept": API_ACCEPT,
                "Authorization": f"Bearer {api_key}",
            },
            timeout=timeout.total_seconds(),
        )

    async def __aenter__(self) -> "HkAPIClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, path: str) -> Any:
        """
        GET the resource or collection at `path` and return the decoded JSON body.

        Raises:
            AuthenticationError: For 401 Unauthorized
            ResourceNotFoundError: For 404 Not Found
            RateLimitError: For 429 Too Many Requests
            APIError: For other errors, including network failures
        """
        log.debug(f"Request: GET {path}")
        try:
            response = await self._client.get(path)
        except httpx.RequestError as e:
            # Network errors, timeouts, etc.
            raise APIError(0, f"Request failed: {str(e)}")

        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"Response Status: {response.status_code}")
            if response.content:
                try:
                    log.debug(f"Response Body: {json.dumps(response.json(), indent=2)}")
                except ValueError:
                    log.debug(f"Response Body (text): {response.text}")

        if response.is_error:
            raise parse_error_response(response)
        return response.json()

    async def get_apps(self) -> List[App]:
        resp = await self.get("/apps")
        return [make_app(app) for app in resp]

    async def get_app(self, name: str) -> App:
        resp = await self.get(f"/apps/{encode_uri_component(name)}")
        return make_app(resp)

    async def get_releases(self, app: str) -> List[Release]:
        resp = await self.get(f"/apps/{encode_uri_component(app)}/releases")
        return [make_release(release) for release in resp]

    async def get_release(self, app: str, name: str) -> Release:
        resp = await self.get(f"/apps/{encode_uri_component(app)}/releases/{encode_uri_component(name)}")
        return make_release(resp)

    async def get_dynos(self, app: str) -> List[Dyno]:
        resp = await self.get(f"/apps/{encode_uri_component(app)}/dynos")
        return [make_dyno(dyno) for dyno in resp]

    async def get_addons(self, app: str) -> List[Addon]:
        resp = await self.get(f"/apps/{encode_uri_component(app)}/addons")
        return [make_addon(addon) for addon in resp]

    async def get_attachments(self, app: str) -> List[Attachment]:
        resp = await self.get(f"/apps/{encode_uri_component(app)}/attachments")
        return [make_attachment(attachment) for attachment in resp]

    async def get_merged_addons(self, app: str) -> List[MergedAddon]:
        addons, attachments = await all_settled([self.get_addons(app), self.get_attachments(app)])
        for result in (addons, attachments):
            if isinstance(result, BaseException):
                raise result
        return merge_addons(addons, attachments)

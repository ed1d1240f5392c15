from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

MOCK_NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


def iso(t: datetime) -> str:
    return t.isoformat().replace("+00:00", "Z")


def ago(**kwargs: float) -> str:
    """An ISO timestamp `kwargs` before the real current time."""
    return iso(datetime.now(timezone.utc) - timedelta(**kwargs))


def app_json(name: str, email: str = "me@example.com", slug_size: Optional[int] = 1234567) -> Dict[str, Any]:
    return {
        "name": name,
        "owner": {"email": email, "id": f"{name}-owner"},
        "created_at": "2026-01-02T12:34:00Z",
        "released_at": "2026-06-13T18:31:00Z",
        "slug_size": slug_size,
    }


def release_json(name: str, commit: str, user: str = "me@example.com") -> Dict[str, Any]:
    return {
        "name": name,
        "commit": commit,
        "user": user,
        "created_at": "2026-06-13T18:31:00Z",
        "description": f"Deploy {commit[:7]}",
    }


def dyno_json(name: str, command: str, state: str = "up", **age: float) -> Dict[str, Any]:
    return {
        "name": name,
        "state": state,
        "command": command,
        "created_at": ago(**age),
        "updated_at": ago(**age),
    }


def addon_json(name: str, plan: str, config_vars: List[str], owner: str = "") -> Dict[str, Any]:
    return {"name": name, "plan": {"name": plan}, "config_vars": config_vars, "owner": {"email": owner}}


def attachment_json(config_var: str, resource_name: str, resource_type: str, owner: str) -> Dict[str, Any]:
    return {
        "name": config_var,
        "resource": {"name": resource_name, "type": resource_type, "owner": {"email": owner}},
    }

import logging
import subprocess
from typing import Dict
from typing import Iterable
from typing import Optional

log = logging.getLogger(__name__)


def describe_commits(commits: Iterable[str]) -> Dict[str, str]:
    """
    Maps each commit that a local git tag points at exactly to that tag's name.

    Returns an empty dict when git is unavailable or this is not a repository.
    """
    unique = sorted({commit for commit in commits if commit})
    if not unique:
        return {}

    try:
        proc = subprocess.run(
            ["git", "name-rev", "--tags", "--no-undefined", "--always", "--", *unique],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as err:
        log.debug(f"Failed to describe commits with git: {err}")
        return {}

    tags: Dict[str, str] = {}
    for line in proc.stdout.splitlines():
        parts = line.split(" ", 1)
        if len(parts) != 2:
            continue
        commit, name = parts
        if not name.startswith("tags/"):
            continue
        name = name[len("tags/") :]
        if name.endswith("^0"):
            name = name[:-2]
        # Names like v1~2 are ancestors of a tag, not the tag itself
        if "~" in name or "^" in name:
            continue
        tags[commit] = name
    return tags


def commit_ref(commit: str, tag: Optional[str] = None) -> str:
    if tag:
        return tag
    return commit[:7]

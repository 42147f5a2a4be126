"""Remote URL parsing helpers."""

from typing import Optional


def repository_shorthand_from_url(url: str) -> Optional[str]:
    """Return ``owner/name`` for a scp-style or URL-style git remote."""
    url = url.strip()
    if "://" in url:
        host_and_path = url.split("://", 1)[1]
        path = host_and_path.split("/", 1)[1] if "/" in host_and_path else ""
    elif ":" in url:
        # git@github.com:owner/name.git
        path = url.split(":", 1)[1]
    else:
        path = url

    path = path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]

    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        return None
    return "/".join(segments[-2:])
